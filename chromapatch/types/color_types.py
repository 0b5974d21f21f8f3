from __future__ import annotations
import os
from typing import TYPE_CHECKING, Iterable, Mapping, Tuple, Union

if TYPE_CHECKING:
    from ..colors.color import Color

ChannelTuple = Tuple[int, ...]
ColorLike = Union["Color", Tuple[int, int, int], Tuple[int, int, int, int], str]
KeyframeInput = Union[Mapping[float, ColorLike], Iterable[Tuple[float, ColorLike]]]
PathLike = Union[str, os.PathLike]
