"""Operation Schemas — Pydantic models for the operations API boundary.

Invariants:
    - Inputs and outputs are string-to-string maps (host-environment contract)
    - Per-operation field rules are NOT expressed here: validate_inputs owns them,
      so HTTP and action callers get identical errors
"""

from pydantic import BaseModel, Field


class OperationInvocation(BaseModel):
    """Raw string inputs for one operation."""
    inputs: dict[str, str] = Field(default_factory=dict)


class OperationOutputs(BaseModel):
    """Rendered outputs of one operation."""
    operation: str
    outputs: dict[str, str]


class OperationDescriptor(BaseModel):
    """Public contract of one operation: input and output names, no values."""
    operation: str
    method: str
    inputs: list[str]
    requires_admin_key: bool
    outputs: list[str]
