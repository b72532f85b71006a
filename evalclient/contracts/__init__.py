"""Metric contracts.

Pydantic models describing evaluation metrics requested from the evaluation
service and the results it returns.

Export policy:
- Keep module imports explicit:
    from evalclient.contracts.metrics import AucRocMetric
- This package module stays empty so that the registries can import
  ``evalclient.contracts.errors`` without pulling in the metric modules that
  register themselves with them.
"""
