"""Swing classifier registry."""

from __future__ import annotations

from baranalytics.classifiers.base import BaseSwingClassifier
from baranalytics.config import ClassifierType

# Lazy registry; classes are imported on first use.
CLASSIFIER_CLASSES: dict[ClassifierType, str] = {
    ClassifierType.SWING_POINT: "baranalytics.classifiers.swing.SwingPointClassifier",
    ClassifierType.MOCK: "baranalytics.classifiers.mock.MockClassifier",
}


def create_classifier(
    classifier_type: ClassifierType,
    **kwargs,
) -> BaseSwingClassifier:
    """Instantiate a classifier by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = CLASSIFIER_CLASSES[classifier_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BaseSwingClassifier", "CLASSIFIER_CLASSES", "create_classifier"]
