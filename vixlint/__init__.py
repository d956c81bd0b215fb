"""Style checker for the Vix scripting language."""

from vixlint.lint import LintOptions, run_lint
from vixlint.pipeline import lint_file, lint_paths, lint_text

__all__ = ["LintOptions", "lint_file", "lint_paths", "lint_text", "run_lint"]
