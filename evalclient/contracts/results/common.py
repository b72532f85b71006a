from __future__ import annotations

"""Result contracts returned by the evaluation service.

These models represent *outputs* computed server-side. The client only
parses, compares and re-serializes them; no metric value is computed here.
Parsing is lenient like the descriptors so new service-side fields do not
break older clients.
"""

from ..common import ContractModel


class MetricResult(ContractModel):
    """Base class for metric results; ``NAME`` matches the descriptor's."""
