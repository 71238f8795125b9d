class MaxFlowError(Exception):
    """Base class for every error raised by the labeling engine."""


class GraphConfigurationError(MaxFlowError, ValueError):
    """The network handed in by the editor / loader is not usable as given."""


class CapacityError(MaxFlowError, ValueError):
    """An edge would leave the 0 <= flow <= capacity band."""


class LabelingError(MaxFlowError, RuntimeError):
    """BFS labeling was asked to expand a node it never labeled."""


class AugmentationError(MaxFlowError, RuntimeError):
    """
    Labels and edges disagree about the residual graph.
    Raised by path reconstruction / augmentation, never expected in normal flow.
    """


class StepLimitExceeded(MaxFlowError, RuntimeError):
    """A driver hit `max_steps` before the engine reached FINISHED."""


class SolverError(MaxFlowError, RuntimeError):
    """A reference solver (OR-Tools / PuLP) did not return an optimal answer."""
