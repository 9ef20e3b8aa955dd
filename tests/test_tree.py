import numpy as np
import pytest
from hearttree import Dataset, TreeClassifier, TreeParams, fit_model, predict
from hearttree.errors import TrainingError


def _tiny_dataset():
    """Return a small dataset separable on the first feature."""
    X = np.array([[1.0, 5.0], [2.0, 3.0], [3.0, 5.0], [4.0, 3.0]])
    y = np.array([0, 0, 1, 1])
    return X, y


def test_fit_predict_separable():
    X, y = _tiny_dataset()
    clf = TreeClassifier(random_state=0).fit(X, y)
    assert clf.predict(X).tolist() == [0, 0, 1, 1]
    assert clf.predict([[0.0, 0.0], [10.0, 0.0]]).tolist() == [0, 1]
    assert clf.score(X, y) == 1.0
    assert clf.get_depth() == 1
    assert clf.get_n_leaves() == 2


def test_proba_sums_to_one():
    X, y = _tiny_dataset()
    clf = TreeClassifier().fit(X, y)
    proba = clf.predict_proba(X)
    assert proba.shape == (4, 2)
    assert np.allclose(proba.sum(axis=1), 1.0)


def test_not_fitted_raises():
    clf = TreeClassifier()
    with pytest.raises(ValueError):
        clf.predict([[1.0, 2.0]])
    with pytest.raises(ValueError):
        clf.export_rules()


def test_empty_training_set():
    with pytest.raises(TrainingError) as exc:
        TreeClassifier().fit(np.empty((0, 2)), np.empty(0, dtype=int))
    assert exc.value.stage == "train"


def test_length_mismatch_in_fit():
    X, y = _tiny_dataset()
    with pytest.raises(TrainingError):
        TreeClassifier().fit(X, y[:3])


def test_rule_export():
    X, y = _tiny_dataset()
    clf = TreeClassifier().fit(X, y, feature_names=["age", "chol"])
    rules = clf.export_rules(class_names=["no", "yes"])
    assert rules == ["age <= 2.5000 => no", "age > 2.5000 => yes"]


def test_print_tree(capsys):
    X, y = _tiny_dataset()
    clf = TreeClassifier(feature_names=["age", "chol"]).fit(X, y)
    clf.print_tree()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "if age <= 2.5000:"
    assert out[1].strip() == "Predict 0 | samples=2"
    assert out[2] == "else:"


def test_max_depth_is_respected():
    # alternating labels need depth > 1 to separate
    X = np.array([[1.0], [2.0], [3.0], [4.0]])
    y = np.array([0, 1, 0, 1])
    stump = TreeClassifier(max_depth=1).fit(X, y)
    assert stump.get_depth() == 1
    assert stump.score(X, y) < 1.0
    full = TreeClassifier().fit(X, y)
    assert full.score(X, y) == 1.0


def test_fit_model_on_dataset():
    X, y = _tiny_dataset()
    train = Dataset(X, y, ("age", "chol"))
    model = fit_model(train, TreeParams(criterion="entropy"))
    assert model.criterion == "entropy"
    assert model.feature_names_ == ["age", "chol"]
    assert predict(model, X).tolist() == y.tolist()


def test_tree_params_validation():
    with pytest.raises(ValueError):
        TreeParams(criterion="mse")
    with pytest.raises(ValueError):
        TreeParams(max_depth=0)
    with pytest.raises(ValueError):
        TreeParams(min_samples_split=1)
    assert TreeParams(max_depth=None).to_estimator_kwargs()["max_depth"] is None
