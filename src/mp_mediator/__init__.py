"""
mp_mediator – typed in-process command dispatch with pipeline behaviors.

Import path convention::

    from mp_mediator.kernel.messaging import Command, MessageBody
    from mp_mediator.application.cqrs import CommandHandler, DispatcherBuilder
    from mp_mediator.application.mapping import MappingProfile
    from mp_mediator.application.pipeline import PipelineBehavior
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
