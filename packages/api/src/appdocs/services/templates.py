# This project was developed with assistance from AI tools.
"""Template name to path resolution."""

from collections.abc import Mapping


class UnknownTemplateError(KeyError):
    """Raised when no path is configured for a template name."""


class TemplatePathProvider:
    """Resolves logical template names to paths relative to a base URI."""

    def __init__(self, template_paths: Mapping[str, str]):
        self._paths = dict(template_paths)

    def path_for(self, template_name: str) -> str:
        try:
            return self._paths[template_name]
        except KeyError:
            raise UnknownTemplateError(
                f"No template path configured for '{template_name}'. "
                f"Known: {', '.join(sorted(self._paths))}"
            ) from None
