# activity_report/config/training_config.py
from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class ModelSpecConfig(BaseModel):
    """
    One classifier configuration.

    (family, resampling) selects the train engine from the registry.
    """

    name: str
    family: Literal["random_forest", "svm_radial"]
    resampling: Literal["cv", "oob"]


class RandomForestConfig(BaseModel):
    n_trees: int = Field(500, ge=1)
    # None -> default grid derived from the predictor count
    mtry_grid: Optional[List[int]] = None
    # OOB error curve resolution (trees added per step)
    curve_step: int = Field(25, ge=1)


class SVMConfig(BaseModel):
    c_grid: List[float] = Field(default_factory=lambda: [0.25, 0.5, 1.0])
    gamma: Union[str, float] = "scale"


def _default_models() -> List[ModelSpecConfig]:
    return [
        ModelSpecConfig(name="rf_cv", family="random_forest", resampling="cv"),
        ModelSpecConfig(name="rf_oob", family="random_forest", resampling="oob"),
        ModelSpecConfig(name="svm_rbf", family="svm_radial", resampling="cv"),
    ]


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FINAL）

    - models order is the tie-break preference order
    - n_jobs workers are shared by all fits
    """

    models: List[ModelSpecConfig] = Field(default_factory=_default_models, min_length=1)

    n_jobs: int = 4
    seed: int = 12345

    cv_folds: int = Field(5, ge=2)
    tune_length: int = Field(3, ge=1)

    rf: RandomForestConfig = Field(default_factory=RandomForestConfig)
    svm: SVMConfig = Field(default_factory=SVMConfig)
