"""
Vue front-end generator for AutoUI.
Fills the coming-soon page templates with the collected questionnaire answers.
"""

import json
import re
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from autoui.exceptions import FileSystemError, TemplateError
from autoui.questionnaire.engine import is_skipped
from autoui.utils.file_utils import FileUtils
from autoui.utils.logging_utils import LoggerMixin

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# answer key -> (placeholder, default)
LANDING_FIELDS = {
    "product_name": ("PRODUCT_NAME", "Our Product"),
    "tagline": ("TAGLINE", "Something new is coming soon."),
    "offer_type": ("OFFER_TYPE", "waitlist"),
    "primary_cta": ("PRIMARY_CTA", "Join the waitlist"),
    "brand_tone": ("BRAND_TONE", "professional"),
}

STATS_CHART_FIELDS = {
    "chart_style": ("CHART_STYLE", "bar"),
    "framework": ("FRAMEWORK", "vue3"),
    "chart_lib": ("CHART_LIB", "chart.js"),
    "modal_usage": ("MODAL_USAGE", "no"),
}

APP_VUE = """
<script setup>
import Landing from "./Landing.vue";
</script>

<template>
  <Landing />
</template>
"""

VITE_CONFIG = """import {{ defineConfig }} from "vite";
import vue from "@vitejs/plugin-vue";

export default defineConfig({{
  plugins: [vue()],
  // For GitHub Pages project sites use "/<repo>/"
  base: process.env.BASE_PATH ?? {base_path},
}});
"""


def resolve_values(
    answers: Mapping[str, str], fields: Mapping[str, tuple]
) -> Dict[str, str]:
    """Placeholder values; missing or skipped answers fall back to defaults."""
    values = {}
    for key, (placeholder, default) in fields.items():
        value = answers.get(key)
        if not value or is_skipped(value):
            value = default
        values[placeholder] = value
    return values


PLACEHOLDER_PATTERN = re.compile(r"\$\{(\w+)\}")


def js_string_escape(value: str) -> str:
    """Escape a value for use inside a double-quoted JS string."""
    return json.dumps(value, ensure_ascii=False)[1:-1].replace("<", "\\u003c")


def fill_template(template: str, values: Mapping[str, str]) -> str:
    """Replace known ${NAME} placeholders in one pass; others are left as they are."""
    return PLACEHOLDER_PATTERN.sub(
        lambda match: js_string_escape(values[match.group(1)])
        if match.group(1) in values
        else match.group(0),
        template,
    )


class VueGenerator(LoggerMixin):
    """Writes the coming-soon Vue sources."""

    def __init__(self, templates_dir: Optional[str] = None, output_dir: str = "coming-soon"):
        self.templates_dir = Path(templates_dir or DEFAULT_TEMPLATES_DIR).expanduser()
        self.output_dir = Path(output_dir).expanduser()

    def _read_template(self, name: str) -> str:
        path = self.templates_dir / name
        try:
            return FileUtils.read_file(str(path))
        except FileSystemError as e:
            raise TemplateError(f"Template not available: {path}", e.details)

    def render(self, answers: Mapping[str, str]) -> Dict[str, str]:
        """Relative output path -> rendered content."""
        landing = fill_template(
            self._read_template("Landing.vue.template"),
            resolve_values(answers, LANDING_FIELDS),
        )
        stats_chart = fill_template(
            self._read_template("StatsChart.vue.template"),
            resolve_values(answers, STATS_CHART_FIELDS),
        )
        return {
            "src/Landing.vue": landing,
            "src/components/StatsChart.vue": stats_chart,
            "src/App.vue": APP_VUE,
        }

    def generate(self, answers: Mapping[str, str], base_path: str = "/") -> List[str]:
        """Write every rendered file under the output directory."""
        files = self.render(answers)
        files["vite.config.js"] = VITE_CONFIG.format(base_path=json.dumps(base_path))

        written = []
        for relative_path, content in files.items():
            target = self.output_dir / relative_path
            FileUtils.write_file(str(target), content)
            written.append(str(target))
            self.logger.debug(f"Wrote {target}")

        self.logger.info(f"Generated {len(written)} files in {self.output_dir}")
        return written
