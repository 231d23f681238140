"""In-memory backend that records forwarded calls for analysis and tests."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Union

from .models import BackendCall, StyleVar, Vec2, Vec4


@dataclass
class CallReport:
    total_calls: int = 0
    image_count: int = 0
    image_button_count: int = 0
    id_pushes: int = 0
    id_pops: int = 0
    style_pushes: int = 0
    style_pops: int = 0
    command_counts: dict[str, int] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    @property
    def balanced(self) -> bool:
        return not self.errors


class RecordingBackend:
    """Records every call in order.

    ``image_button`` answers from ``clicks`` first, one value per call, and
    falls back to ``default_click`` once the queue is empty.
    """

    def __init__(self, clicks: Iterable[bool] = (), default_click: bool = False) -> None:
        self.calls: list[BackendCall] = []
        self.clicks = deque(clicks)
        self.default_click = default_click
        self.id_depth = 0
        self.style_depth = 0

    def _record(self, name: str, result=None, **args) -> None:
        self.calls.append(BackendCall(name=name, args=args, result=result))

    def image(self, texture_id: int, size: Vec2, uv0: Vec2, uv1: Vec2, tint_col: Vec4, border_col: Vec4) -> None:
        self._record(
            "image",
            texture_id=texture_id,
            size=size,
            uv0=uv0,
            uv1=uv1,
            tint_col=tint_col,
            border_col=border_col,
        )

    def image_button(
        self,
        str_id: str,
        texture_id: int,
        size: Vec2,
        uv0: Vec2,
        uv1: Vec2,
        bg_col: Vec4,
        tint_col: Vec4,
    ) -> bool:
        clicked = self.clicks.popleft() if self.clicks else self.default_click
        self._record(
            "image_button",
            result=clicked,
            str_id=str_id,
            texture_id=texture_id,
            size=size,
            uv0=uv0,
            uv1=uv1,
            bg_col=bg_col,
            tint_col=tint_col,
        )
        return clicked

    def push_id(self, key: Union[int, str]) -> None:
        self.id_depth += 1
        self._record("push_id", key=key)

    def pop_id(self) -> None:
        self.id_depth -= 1
        self._record("pop_id")

    def push_style_var(self, var: StyleVar, value: Vec2) -> None:
        self.style_depth += 1
        self._record("push_style_var", var=var.name, value=value)

    def pop_style_var(self, count: int = 1) -> None:
        self.style_depth -= count
        self._record("pop_style_var", count=count)

    def named(self, name: str) -> list[BackendCall]:
        return [c for c in self.calls if c.name == name]

    def clear(self) -> None:
        self.calls.clear()

    def report(self) -> CallReport:
        report = CallReport(total_calls=len(self.calls))
        id_depth = 0
        style_depth = 0

        for call in self.calls:
            report.command_counts[call.name] = report.command_counts.get(call.name, 0) + 1
            if call.name == "image":
                report.image_count += 1
            elif call.name == "image_button":
                report.image_button_count += 1
            elif call.name == "push_id":
                report.id_pushes += 1
                id_depth += 1
            elif call.name == "pop_id":
                report.id_pops += 1
                id_depth -= 1
                if id_depth < 0:
                    report.errors.append("id_stack_underflow")
                    id_depth = 0
            elif call.name == "push_style_var":
                report.style_pushes += 1
                style_depth += 1
            elif call.name == "pop_style_var":
                count = int(call.args.get("count", 1))
                report.style_pops += count
                style_depth -= count
                if style_depth < 0:
                    report.errors.append("style_stack_underflow")
                    style_depth = 0

        if id_depth:
            report.errors.append("unbalanced_id_stack")
        if style_depth:
            report.errors.append("unbalanced_style_stack")
        return report
