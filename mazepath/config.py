from .graph.constants import MazeGraphDefaults, PriorityQueueDefaults


class MazePathConfig:
    def __init__(self,
                 check_invariants: bool = PriorityQueueDefaults.CHECK_INVARIANTS,
                 distance_metric: str = MazeGraphDefaults.DISTANCE_METRIC,
                 base_weight: float = MazeGraphDefaults.BASE_WEIGHT,
                 climb_factor: float = MazeGraphDefaults.CLIMB_FACTOR,
                 descent_factor: float = MazeGraphDefaults.DESCENT_FACTOR):
        if distance_metric not in MazeGraphDefaults.DISTANCE_METRICS:
            raise ValueError(
                f"Unknown distance metric {distance_metric!r}, expected one of "
                f"{MazeGraphDefaults.DISTANCE_METRICS}"
            )
        self.check_invariants = check_invariants
        self.distance_metric = distance_metric
        self.base_weight = base_weight
        self.climb_factor = climb_factor
        self.descent_factor = descent_factor

    @classmethod
    def from_args(cls, args=None):
        if args is None:
            return cls()
        defaults = cls()
        return cls(
            check_invariants=getattr(args, "check_invariants", defaults.check_invariants),
            distance_metric=getattr(args, "distance_metric", defaults.distance_metric),
            base_weight=getattr(args, "base_weight", defaults.base_weight),
            climb_factor=getattr(args, "climb_factor", defaults.climb_factor),
            descent_factor=getattr(args, "descent_factor", defaults.descent_factor),
        )


maze_config = None


def init_config(args=None):
    global maze_config
    maze_config = MazePathConfig.from_args(args)
    return maze_config


def get_config():
    if maze_config is None:
        return init_config()
    return maze_config
