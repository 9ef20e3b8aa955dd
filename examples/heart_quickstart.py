from time import perf_counter
from hearttree import TreeParams, load_dataset, split_with_ratio, fit_model, predict, evaluate
from hearttree.evaluate import format_accuracy, format_confusion

t0 = perf_counter()
ds = load_dataset("heart.csv")
print(ds.to_frame().describe().T)

split = split_with_ratio(ds, 0.8, shuffle=True, random_state=42)
clf = fit_model(split.train, TreeParams(criterion="gini", max_depth=4, min_samples_leaf=5))
pred = predict(clf, split.test.records)

ev = evaluate(pred, split.test.targets)
print(format_accuracy(ev))
print(format_confusion(ev))
clf.print_tree(class_names=["No disease", "Disease"])
for rule in clf.export_rules(class_names=["no", "yes"]):
    print(rule)
print(f"total: {perf_counter()-t0:.3f} s")
