"""Caption specification type (tagged union of the caption variants)."""

from typing import TypeAlias

from .LabelOnly import LabelOnly
from .LabelWithLink import LabelWithLink
from .NoCaption import NoCaption

CaptionSpec: TypeAlias = NoCaption | LabelOnly | LabelWithLink
