# -*- coding: utf-8 -*-
"""
hearttree.tree
==============

Adapter around scikit-learn's ``DecisionTreeClassifier``.

The tree-growing algorithm itself lives in scikit-learn.  This module only
fixes the hyperparameters the pipeline cares about (split criterion, maximum
depth, minimum samples per split and per leaf), turns estimator failures into
:class:`~hearttree.errors.TrainingError`, and adds a couple of inspection
helpers: rule export and pretty printing of the fitted tree.

The functional pair :func:`fit_model` / :func:`predict` is what the pipeline
calls; :class:`TreeClassifier` follows the scikit-learn estimator conventions
so it can also be used on its own.
"""

from __future__ import annotations

import numpy as np
from loguru import logger
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.tree import DecisionTreeClassifier

from .config import TreeParams
from .dataset import Dataset
from .errors import TrainingError

_LEAF = -1


class TreeClassifier(BaseEstimator, ClassifierMixin):
    """
    Decision tree classifier with a fixed, explicit hyperparameter surface.

    Parameters
    ----------
    criterion : {"gini", "entropy"}, default="gini"
        Split quality measure.
    max_depth : int or None, default=100
        Maximum depth of the tree.  If ``None`` the depth is unbounded.
    min_samples_split : int, default=2
        Minimum number of training samples required to split a node.
    min_samples_leaf : int, default=1
        Minimum number of samples required in each child after a split.
    random_state : int or None, default=None
        Seed for tie-breaking between equally good splits.
    feature_names : list[str] or None, default=None
        Names used by :meth:`export_rules` and :meth:`print_tree`.

    Notes
    -----
    - ``fit`` raises :class:`~hearttree.errors.TrainingError` rather than
      ``ValueError`` when the training data is unusable.
    - ``predict`` and the export helpers raise ``ValueError`` when called
      before ``fit``.
    """

    def __init__(
        self,
        *,
        criterion: str = "gini",
        max_depth: int | None = 100,
        min_samples_split: int = 2,
        min_samples_leaf: int = 1,
        random_state: int | None = None,
        feature_names: list[str] | None = None,
    ):
        self.criterion = criterion
        self.max_depth = max_depth
        self.min_samples_split = min_samples_split
        self.min_samples_leaf = min_samples_leaf
        self.random_state = random_state
        self.feature_names = feature_names

    @classmethod
    def from_params(cls, params: TreeParams, feature_names=None) -> "TreeClassifier":
        return cls(**params.to_estimator_kwargs(), feature_names=feature_names)

    def fit(self, X, y, feature_names=None):
        """
        Grow the tree on ``X`` and ``y``.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            Training records.
        y : array-like of shape (n_samples,)
            Integer labels.
        feature_names : list[str], optional
            Overrides the names given at construction time.

        Returns
        -------
        self

        Raises
        ------
        TrainingError
            If the training set is empty, ``X`` and ``y`` disagree in length,
            or the estimator rejects the data.
        """
        X = np.asarray(X, dtype=float)
        y = np.asarray(y)
        if X.ndim != 2:
            raise TrainingError(f"training records must be 2D, got shape {X.shape}")
        if len(X) == 0:
            raise TrainingError("cannot fit a decision tree on an empty training set")
        if len(X) != len(y):
            raise TrainingError(f"records has {len(X)} rows but targets has {len(y)}")

        names = feature_names if feature_names is not None else self.feature_names
        if names is not None and len(names) != X.shape[1]:
            raise TrainingError("feature_names length must match X.shape[1]")
        self.feature_names_ = (
            list(names) if names is not None else [f"X[{i}]" for i in range(X.shape[1])]
        )

        estimator = DecisionTreeClassifier(
            criterion=self.criterion,
            max_depth=self.max_depth,
            min_samples_split=self.min_samples_split,
            min_samples_leaf=self.min_samples_leaf,
            random_state=self.random_state,
        )
        try:
            estimator.fit(X, y)
        except (ValueError, TypeError) as e:
            raise TrainingError(f"decision tree fit failed: {e}") from e

        self.estimator_ = estimator
        self.classes_ = estimator.classes_
        self.n_features_in_ = X.shape[1]
        logger.debug("Fitted tree: depth={}, leaves={}",
                     estimator.get_depth(), estimator.get_n_leaves())
        return self

    def _check_fitted(self):
        if getattr(self, "estimator_", None) is None:
            raise ValueError("Estimator not fitted. Call fit(...) first.")

    def predict(self, X):
        """
        Predict class labels for the provided samples.

        Returns
        -------
        ndarray of shape (n_samples,)
            Integer labels drawn from :attr:`classes_`.

        Raises
        ------
        ValueError
            If the estimator has not been fitted.
        """
        self._check_fitted()
        return np.asarray(self.estimator_.predict(np.asarray(X, dtype=float)), dtype=np.int64)

    def predict_proba(self, X):
        """Class probabilities per sample, columns ordered as :attr:`classes_`."""
        self._check_fitted()
        return self.estimator_.predict_proba(np.asarray(X, dtype=float))

    def get_depth(self) -> int:
        self._check_fitted()
        return int(self.estimator_.get_depth())

    def get_n_leaves(self) -> int:
        self._check_fitted()
        return int(self.estimator_.get_n_leaves())

    # ------------------------------------------------------------------
    # Rule export / printing helpers
    # ------------------------------------------------------------------
    def export_rules(self, *, feature_names=None, class_names=None) -> list[str]:
        """
        Export every root-to-leaf path as ``<antecedent> => <class>``.

        Parameters
        ----------
        feature_names : list[str], optional
            Names for the input features.  Defaults to those seen in ``fit``.
        class_names : list[str], optional
            Names for the classes, ordered according to :attr:`classes_`.

        Returns
        -------
        list[str]
            One rule per leaf, left to right.
        """
        self._check_fitted()
        fn = feature_names if feature_names is not None else self.feature_names_
        rules: list[str] = []
        self._collect_rules(0, [], rules, fn, class_names)
        return rules

    def print_tree(self, feature_names=None, class_names=None):
        """Pretty-print the fitted tree to ``stdout`` as nested if/else."""
        self._check_fitted()
        fn = feature_names if feature_names is not None else self.feature_names_
        for line in self._node_lines(0, "", fn, class_names):
            print(line)

    def _leaf_label(self, node: int, cn) -> str:
        k = int(np.argmax(self.estimator_.tree_.value[node][0]))
        return str(cn[k]) if cn is not None else str(self.classes_[k])

    def _collect_rules(self, node: int, parts, rules, fn, cn):
        t = self.estimator_.tree_
        if t.children_left[node] == _LEAF:
            body = " AND ".join(parts) if parts else "<root>"
            rules.append(f"{body} => {self._leaf_label(node, cn)}")
            return
        name = fn[t.feature[node]]
        thr = t.threshold[node]
        self._collect_rules(t.children_left[node], parts + [f"{name} <= {thr:.4f}"], rules, fn, cn)
        self._collect_rules(t.children_right[node], parts + [f"{name} > {thr:.4f}"], rules, fn, cn)

    def _node_lines(self, node: int, indent: str, fn, cn):
        t = self.estimator_.tree_
        if t.children_left[node] == _LEAF:
            yield (f"{indent}Predict {self._leaf_label(node, cn)} "
                   f"| samples={int(t.n_node_samples[node])}")
            return
        name = fn[t.feature[node]]
        yield f"{indent}if {name} <= {t.threshold[node]:.4f}:"
        yield from self._node_lines(t.children_left[node], indent + "  ", fn, cn)
        yield f"{indent}else:"
        yield from self._node_lines(t.children_right[node], indent + "  ", fn, cn)


def fit_model(train: Dataset, params: TreeParams | None = None) -> TreeClassifier:
    """Fit a :class:`TreeClassifier` on a training :class:`Dataset`."""
    params = params if params is not None else TreeParams()
    model = TreeClassifier.from_params(params, feature_names=list(train.feature_names))
    return model.fit(train.records, train.targets)


def predict(model: TreeClassifier, records) -> np.ndarray:
    """Predicted labels for ``records``, one per row."""
    return model.predict(records)
