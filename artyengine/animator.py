"""Frame animations and a state machine that switches between them."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from artyengine.delegate import MulticastDelegate, UnicastDelegate
from artyengine.vector import Vector2


class TransitionComparison(Enum):
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    LESS = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="


_OPERATORS: Dict[TransitionComparison, Callable[[Any, Any], bool]] = {
    TransitionComparison.EQUAL: operator.eq,
    TransitionComparison.NOT_EQUAL: operator.ne,
    TransitionComparison.GREATER: operator.gt,
    TransitionComparison.LESS: operator.lt,
    TransitionComparison.GREATER_EQUAL: operator.ge,
    TransitionComparison.LESS_EQUAL: operator.le,
}


def compare(a: Any, b: Any, comparison: TransitionComparison) -> bool:
    """Apply ``comparison`` to ``a`` and ``b``."""
    return bool(_OPERATORS[comparison](a, b))


class ComparisonMode(Enum):
    """AND needs every condition to hold, OR any one of them."""

    AND = "and"
    OR = "or"


class ParamType(Enum):
    INTEGER = "integer"
    BOOL = "bool"
    FLOAT = "float"
    TRIGGER = "trigger"


@dataclass(frozen=True)
class IntegerCondition:
    param_name: str
    value: int
    comparison: TransitionComparison = TransitionComparison.EQUAL


@dataclass(frozen=True)
class FloatCondition:
    param_name: str
    value: float
    comparison: TransitionComparison = TransitionComparison.EQUAL


@dataclass(frozen=True)
class BoolCondition:
    param_name: str
    value: bool


@dataclass(frozen=True)
class TriggerCondition:
    param_name: str


Condition = Union[IntegerCondition, FloatCondition, BoolCondition, TriggerCondition]


class Animation:
    """A sequence of frames played at a fixed interval while it is the active node."""

    def __init__(
        self,
        frames: Sequence[Any] = (),
        offset: Vector2 = Vector2.ZERO,
        interval: float = 0.0,
    ) -> None:
        self.frames: tuple = tuple(frames)
        self.offset = offset
        self.interval = interval
        self.index = 0
        self.looping = True
        self.reverse = False
        self.running = False
        self.on_anim_enter = UnicastDelegate()
        self.on_anim_exit = UnicastDelegate()
        self.nexts: List[AnimEdge] = []
        self._controller: Optional[Animator] = None
        self._montage = False
        self._exit_lock = False
        self._elapsed = 0.0
        self._notifications: Dict[int, Callable[[], Any]] = {}
        self._on_montage_exit = UnicastDelegate()

    def __repr__(self) -> str:
        return f"Animation(frames={len(self.frames)}, index={self.index})"

    @property
    def num(self) -> int:
        return len(self.frames)

    @property
    def montage(self) -> bool:
        """Whether the animation is currently playing once as a montage."""
        return self._montage

    @property
    def current_frame(self) -> Any:
        return self.frames[self.index]

    def load(self, frames: Sequence[Any], offset: Vector2 = Vector2.ZERO) -> None:
        """Replace the frames and their drawing offset."""
        self.frames = tuple(frames)
        self.offset = offset

    def add_notification(self, index: int, callback: Callable[[], Any]) -> None:
        """Call ``callback`` whenever frame ``index`` is reached; the first one added wins."""
        self._notifications.setdefault(index, callback)

    def advance(self, elapsed: float) -> int:
        """Let ``elapsed`` seconds pass and return the number of frame ticks taken.

        A non-positive interval ticks once per call. Nothing happens while the
        animation is not running.
        """
        if not self.running:
            return 0
        if self.interval <= 0:
            self.tick()
            return 1
        self._elapsed += elapsed
        ticks = 0
        while self.running and self._elapsed >= self.interval:
            self._elapsed -= self.interval
            self.tick()
            ticks += 1
        return ticks

    def _at_end(self) -> bool:
        if self.reverse:
            return self.index == self.num - 1
        return self.index == 0

    def tick(self) -> None:
        """Step one frame, handling montage exit, unconditional transitions and notifications."""
        controller = self._controller
        if controller is None or self.num == 0:
            return

        if not self._montage and not self.looping:
            if self.index == self.num - 1 and not self.reverse:
                return
            if self.index == 0 and self.reverse:
                return

        self.index = (self.index + (-1 if self.reverse else 1)) % self.num
        at_end = self._at_end()

        if at_end and self._montage:
            self._montage = False
            if self._on_montage_exit.is_bound:
                self._on_montage_exit.execute()
                return
            for edge in list(self.nexts):
                if controller.check_conditions(edge):
                    controller.set_node(edge.end)
                    return

        if at_end:
            for edge in list(self.nexts):
                if edge.is_unconditional:
                    controller.set_node(edge.end)
                    return

        callback = self._notifications.get(self.index)
        if callback is not None:
            callback()


class AnimEdge:
    """Directed transition from one animation to another, guarded by conditions."""

    def __init__(
        self,
        start: Animation,
        end: Animation,
        mode: ComparisonMode = ComparisonMode.AND,
    ) -> None:
        self.start = start
        self.end = end
        self.mode = mode
        self.integer_conditions: List[IntegerCondition] = []
        self.float_conditions: List[FloatCondition] = []
        self.bool_conditions: List[BoolCondition] = []
        self.trigger_conditions: List[TriggerCondition] = []
        start.nexts.append(self)

    def add_condition(self, condition: Condition) -> None:
        if isinstance(condition, IntegerCondition):
            self.integer_conditions.append(condition)
        elif isinstance(condition, FloatCondition):
            self.float_conditions.append(condition)
        elif isinstance(condition, BoolCondition):
            self.bool_conditions.append(condition)
        elif isinstance(condition, TriggerCondition):
            self.trigger_conditions.append(condition)
        else:
            raise TypeError(f"not a transition condition: {condition!r}")

    @property
    def is_unconditional(self) -> bool:
        return not (
            self.integer_conditions
            or self.float_conditions
            or self.bool_conditions
            or self.trigger_conditions
        )


class Animator:
    """State machine over named animations driven by typed parameters."""

    def __init__(self) -> None:
        self.enabled = True
        self.step = 1.0
        self.on_activated = MulticastDelegate()
        self.on_deactivated = MulticastDelegate()
        self._animations: Dict[str, Animation] = {}
        self._integers: Dict[str, int] = {}
        self._floats: Dict[str, float] = {}
        self._bools: Dict[str, bool] = {}
        self._triggers: Dict[str, bool] = {}
        self._node: Optional[Animation] = None
        self._last_node: Optional[Animation] = None
        self._sprite: Any = None

    @property
    def current(self) -> Optional[Animation]:
        """Animation being played."""
        return self._node

    @property
    def sprite(self) -> Any:
        """Frame last handed out by ``update`` or ``play_montage``."""
        return self._sprite

    def insert(self, name: str, animation: Animation) -> bool:
        """Register ``animation`` under ``name``; an animation without frames is ignored."""
        if not animation.frames:
            return False
        self._animations.setdefault(name, animation)
        animation._controller = self
        return True

    def _resolve(self, node: Union[str, Animation]) -> Animation:
        if isinstance(node, Animation):
            return node
        try:
            return self._animations[node]
        except KeyError:
            raise KeyError(f"no animation named {node!r}") from None

    def set_node(self, node: Union[str, Animation]) -> None:
        """Switch to ``node`` (a name or an animation), running exit and enter callbacks."""
        target = self._resolve(node)
        current = self._node
        if current is not None and not current._exit_lock:
            current.running = False
            current._exit_lock = True
            try:
                current.on_anim_exit.execute()
            finally:
                current._exit_lock = False
            if self._node is not current:
                return

        self._node = target
        target.index = target.num - 1 if target.reverse else 0
        target.running = True
        target.on_anim_enter.execute()

    def is_playing(self, name: str) -> bool:
        return self._node is not None and self._animations.get(name) is self._node

    def play_montage(self, name: str) -> None:
        """Play ``name`` once; without outgoing edges the previous node resumes afterwards."""
        target = self._resolve(name)
        if self._node is target:
            target.index = target.num - 1 if target.reverse else 0
            return
        self._last_node = self._node
        self.set_node(name)
        node = self._node
        if node is None:
            return
        node._montage = True
        self._sprite = node.current_frame

        if not node.nexts:
            node._on_montage_exit.bind(self._restore_after_montage)

    def _restore_after_montage(self) -> None:
        node = self._node
        if node is not None:
            node.running = False
            node.on_anim_exit.execute()
        self._node = self._last_node
        if self._node is not None:
            self._node.running = True
            self._node.on_anim_enter.execute()

    def add_parameter(self, name: str, param_type: ParamType) -> None:
        """Declare a parameter with its zero value; an existing one is kept."""
        if param_type is ParamType.INTEGER:
            self._integers.setdefault(name, 0)
        elif param_type is ParamType.FLOAT:
            self._floats.setdefault(name, 0.0)
        elif param_type is ParamType.BOOL:
            self._bools.setdefault(name, False)
        else:
            self._triggers.setdefault(name, False)

    def set_integer(self, name: str, value: int) -> None:
        if name in self._integers:
            self._integers[name] = int(value)

    def set_float(self, name: str, value: float) -> None:
        if name in self._floats:
            self._floats[name] = float(value)

    def set_bool(self, name: str, value: bool) -> None:
        if name in self._bools:
            self._bools[name] = bool(value)

    def set_trigger(self, name: str) -> None:
        if name in self._triggers:
            self._triggers[name] = True

    def get_integer(self, name: str) -> int:
        return self._integers.get(name, 0)

    def get_float(self, name: str) -> float:
        return self._floats.get(name, 0.0)

    def get_bool(self, name: str) -> bool:
        return self._bools.get(name, False)

    def check_conditions(self, edge: AnimEdge) -> bool:
        """Whether ``edge`` may be taken; checked triggers are consumed.

        Conditions on undeclared parameters are skipped. The result of the last
        evaluated condition decides when no early answer is reached.
        """
        result = False
        checks = []
        for condition in edge.integer_conditions:
            if condition.param_name in self._integers:
                checks.append(("int", condition))
        for condition in edge.float_conditions:
            if condition.param_name in self._floats:
                checks.append(("float", condition))
        for condition in edge.bool_conditions:
            if condition.param_name in self._bools:
                checks.append(("bool", condition))
        for condition in edge.trigger_conditions:
            if condition.param_name in self._triggers:
                checks.append(("trigger", condition))

        for kind, condition in checks:
            if kind == "int":
                result = compare(
                    self._integers[condition.param_name], condition.value, condition.comparison
                )
            elif kind == "float":
                result = compare(
                    self._floats[condition.param_name], condition.value, condition.comparison
                )
            elif kind == "bool":
                result = self._bools[condition.param_name] == condition.value
            else:
                result = self._triggers[condition.param_name]
                self._triggers[condition.param_name] = False
            if result and edge.mode is ComparisonMode.OR:
                return True
            if not result and edge.mode is ComparisonMode.AND:
                return False
        return result

    def update(self) -> Any:
        """Refresh the shown frame and follow the first transition whose conditions hold.

        Returns the frame being shown. While disabled the shown frame is frozen.
        """
        node = self._node
        if node is None:
            return self._sprite

        frame = node.current_frame
        if frame is not self._sprite:
            if self._sprite is not None and not self.enabled:
                return self._sprite
            self._sprite = frame

        if node.montage:
            return self._sprite
        for edge in list(node.nexts):
            if self.check_conditions(edge):
                self.set_node(edge.end)
                break
        return self._sprite

    def activate(self) -> None:
        self.on_activated.broadcast()
        self.enabled = True
        if self._node is not None:
            self._node.running = True

    def deactivate(self) -> None:
        self.on_deactivated.broadcast()
        self.enabled = False
        if self._node is not None:
            self._node.running = False