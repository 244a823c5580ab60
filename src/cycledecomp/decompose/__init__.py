from .decomposer import CycleStep, Decomposition, decompose, iter_disjoint_cycles

__all__ = [
    "CycleStep",
    "Decomposition",
    "decompose",
    "iter_disjoint_cycles",
]
