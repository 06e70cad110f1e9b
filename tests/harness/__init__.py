"""Test harness for tailtext.

Re-exports all public API for convenient imports:
    from tests.harness import strip_ansi, render_all, ...
"""

from tests.harness.content import (
    strip_ansi,
    render_all,
)
from tests.harness.builders import (
    styled,
    nested,
)
