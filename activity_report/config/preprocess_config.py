# activity_report/config/preprocess_config.py
from pydantic import BaseModel, Field


class PreprocessConfig(BaseModel):
    """
    PreprocessConfig（FINAL）

    All statistics are fit on the training subset only.
    """

    # split
    train_fraction: float = Field(0.75, gt=0.0, lt=1.0)
    seed: int = 12345

    # missingness: drop when fraction >= threshold
    missing_threshold: float = Field(0.8, gt=0.0, le=1.0)

    # scaler: sd <= tolerance counts as zero variance
    variance_tolerance: float = Field(1e-12, ge=0.0)

    # pca: minimal k with cumulative ratio >= pca_variance
    pca_variance: float = Field(0.95, gt=0.0, le=1.0)
