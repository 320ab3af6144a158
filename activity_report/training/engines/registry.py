from typing import Callable, Dict, Tuple

from activity_report.config.training_config import ModelSpecConfig, TrainingConfig
from activity_report.training.engines.model_train_engine import ModelTrainEngine
from activity_report.training.engines.model.random_forest_cv_train_engine import (
    RandomForestCVTrainEngine,
)
from activity_report.training.engines.model.random_forest_oob_train_engine import (
    RandomForestOOBTrainEngine,
)
from activity_report.training.engines.model.svm_radial_train_engine import (
    SVMRadialTrainEngine,
)

_ENGINE_REGISTRY: Dict[
    Tuple[str, str],
    Callable[[ModelSpecConfig, TrainingConfig], ModelTrainEngine],
] = {
    ("random_forest", "cv"): lambda spec, cfg: RandomForestCVTrainEngine(spec, cfg),
    ("random_forest", "oob"): lambda spec, cfg: RandomForestOOBTrainEngine(spec, cfg),
    ("svm_radial", "cv"): lambda spec, cfg: SVMRadialTrainEngine(spec, cfg),
}


def resolve_model_train_engine(
        *, spec: ModelSpecConfig, cfg: TrainingConfig
) -> ModelTrainEngine:
    key = (spec.family, spec.resampling)

    if key not in _ENGINE_REGISTRY:
        available = ", ".join(str(k) for k in _ENGINE_REGISTRY)
        raise ValueError(
            f"No ModelTrainEngine for {key}. Available: {available}"
        )

    return _ENGINE_REGISTRY[key](spec, cfg)
