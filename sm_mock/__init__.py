"""Service Manager mock package.

Stateless stand-in for a service-broker management API: offerings, plans,
instances and bindings are synthesized per request and never stored.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "1.0.0"
