"""Render command - renders a template file containing codeblock tags."""

from pathlib import Path
from typing import Any

from jinja2 import FileSystemLoader, TemplateError

from ..config.CodefigConfig import CodefigConfig
from ..StageResult import StageResult
from .create_environment import create_environment


def cmd_render(
    template: Path,
    output_path: Path | None = None,
    config_path: Path | None = None,
) -> StageResult:
    """Render a Jinja2 template file with the codeblock tag available.

    Args:
        template: Template file; its directory is the loader root
        output_path: Optional output file path
        config_path: Optional config file

    Returns:
        StageResult with the rendered document in 'content' field of output
    """

    def do_work(result_obj: StageResult) -> Any:
        yield (0.1, "Loading configuration...")

        try:
            if not template.is_file():
                raise ValueError(f"Template not found: {template}")
            config = CodefigConfig.load(config_path)

            yield (0.4, "Rendering template...")
            env = create_environment(config.highlight, FileSystemLoader(str(template.parent)))
            content = env.get_template(template.name).render()

            if output_path is not None:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(content, encoding="utf-8")

            result_obj.output = {
                "content": content,
                "template": str(template),
                "output_path": str(output_path) if output_path else None,
            }
            result_obj.result = f"Rendered {template.name}" + (f" to {output_path}" if output_path else "")
            result_obj.success = True
            yield (1.0, "Complete")

        except (ValueError, OSError, TemplateError) as e:
            result_obj.output = {
                "content": "",
                "template": str(template),
                "output_path": str(output_path) if output_path else None,
            }
            result_obj.result = str(e)
            result_obj.success = False
            yield (1.0, "Failed")

    return StageResult(
        announce=f"Rendering {template}...",
        progress_callback=do_work,
    )
