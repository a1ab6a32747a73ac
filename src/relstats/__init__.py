"""`relstats` - statistics and introspection over identifier-indexed relations.

Subpackages:
- contracts: Error types and fail-fast enforcement
- data: Vector, bit and label value types plus type descriptors
- database: Relations, string views and multi-relation databases
- stats: Dimensionality, centroid, covariance, variance, min/max
- schemas: Pydantic configuration

Modules:
- labels: Label representation fallback and label-pattern lookup
- introspection: Runtime element type inference
- logging_setup: Root logger configuration
"""

__version__ = "0.1.0"
