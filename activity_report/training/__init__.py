"""
Training Doctrine (FINAL)

------------------------------------------------------------
Paradigm: Split-Scoped Batch Training
------------------------------------------------------------

Definition:
- TrainingUnit = the training subset of ONE stratified split
- Model        = Batch (fit on finite, fully dense dataset)
- Selection    = resampled accuracy (k-fold CV or out-of-bag)

Semantics:
- Every estimator sees principal-component scores of the training
  subset only. The evaluation subset is touched exactly once, after
  model selection, by the evaluator.
- Each configured model is tuned independently; the selected
  hyperparameter is the first candidate with the highest estimate.
- Models are ephemeral: fit once, scored, discarded with the run.

Parallelism:
- All fits share ONE joblib worker pool (training.n_jobs).
- Workers read an immutable copy of the training table and write only
  their own fold result; nothing requires locks.

Non-goals:
- Model persistence / publishing
- Online or incremental updates
- Cross-run model reuse
"""
