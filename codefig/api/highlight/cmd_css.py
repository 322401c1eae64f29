"""CSS command - emits the stylesheet for highlighted code figures."""

from pathlib import Path
from typing import Any

from ..config.CodefigConfig import CodefigConfig
from ..config.HighlightConfig import HighlightConfig
from ..StageResult import StageResult
from .PygmentsHighlighter import PygmentsHighlighter


def cmd_css(style: str | None = None, config_path: Path | None = None) -> StageResult:
    """Generate the Pygments stylesheet scoped to the configured CSS class.

    Args:
        style: Pygments style overriding the configured one
        config_path: Optional config file

    Returns:
        StageResult with the stylesheet in the 'css' field of output
    """

    def do_work(result_obj: StageResult) -> Any:
        yield (0.1, "Loading configuration...")

        try:
            config = CodefigConfig.load(config_path)
            highlight_config = config.highlight
            if style is not None:
                highlight_config = HighlightConfig(**{**highlight_config.model_dump(), "style": style})

            yield (0.5, "Generating stylesheet...")
            css = PygmentsHighlighter(highlight_config).style_defs()

            result_obj.output = {
                "css": css,
                "style": highlight_config.style,
                "css_class": highlight_config.css_class,
            }
            result_obj.result = f"Generated '{highlight_config.style}' stylesheet for .{highlight_config.css_class}"
            result_obj.success = True
            yield (1.0, "Complete")

        except ValueError as e:
            result_obj.output = {"css": "", "style": style, "css_class": None}
            result_obj.result = str(e)
            result_obj.success = False
            yield (1.0, "Failed")

    return StageResult(
        announce=f"Generating stylesheet for style {style or '(configured)'}...",
        progress_callback=do_work,
    )
