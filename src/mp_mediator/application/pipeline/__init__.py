"""Application pipeline – behavior chain around a command handler."""
from mp_mediator.application.pipeline.behavior import Next, PipelineBehavior, Terminal
from mp_mediator.application.pipeline.behaviors import KeyDerivationBehavior, TimingBehavior
from mp_mediator.application.pipeline.context import DispatchContext
from mp_mediator.application.pipeline.pipeline import Pipeline, ShortCircuitPolicy

__all__ = [
    "DispatchContext",
    "KeyDerivationBehavior",
    "Next",
    "Pipeline",
    "PipelineBehavior",
    "ShortCircuitPolicy",
    "Terminal",
    "TimingBehavior",
]
