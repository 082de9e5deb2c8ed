"""Contracts (Protocol) the core depends on.

Concrete adapters (HTTP client, rich console) implement them; tests swap in
in-memory fakes.
"""

from core.interfaces.job_service import JobService, RawBody
from core.interfaces.output import OutputSink

__all__ = ["JobService", "OutputSink", "RawBody"]
