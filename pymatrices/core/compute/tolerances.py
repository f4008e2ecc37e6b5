"""
Tolerance tiers for numerical validation.

Defines precision expectations for the CPU float64 compute path:
- well-conditioned problems: near machine precision
- ill-conditioned problems (cond > 1e4): relaxed

Used by the test suite to pick assertion tolerances for results whose
accuracy depends on the conditioning of the input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference, well-conditioned problems
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned',
)

# CPU reference, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Above this condition number a result is treated as ill-conditioned.
ILL_CONDITIONED_THRESHOLD = 1e4


def select_tolerance(condition_number: float) -> ToleranceTier:
    """Select the tolerance tier appropriate for a problem's conditioning."""
    if condition_number > ILL_CONDITIONED_THRESHOLD:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
