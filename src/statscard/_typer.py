"""Helpers for raising Typer parameter errors."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param: Any = None,
    param_hint: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter`, chained to ``cause`` when given.

    Only the keyword arguments that are actually set are forwarded so the
    error message shows a hint solely when one is available.
    """

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param is not None:
        kwargs["param"] = param
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    raise typer.BadParameter(message, **kwargs) from cause
