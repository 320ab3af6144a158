"""
Model Train Engines (FINAL)

Every ModelTrainEngine defines COMPLETE training semantics for one
(family, resampling) pair:

- how the hyperparameter grid is built
- how candidates are scored (k-fold CV accuracy / OOB accuracy)
- which fitted estimator is returned

A ModelTrainEngine MUST NOT:
- see the evaluation subset
- guess label semantics (labels are categorical, passed as is)
- persist anything

On success every engine returns a TrainResult:

result.model     fitted estimator, refit on the full training subset
result.accuracy  resampled accuracy of the chosen candidate
result.params    chosen hyperparameters
result.tuning    candidate → estimate table
"""
