"""Run pylint in-process with only the forbid-imports message enabled."""

import logging

from pylint.lint import Run

from forbid_imports.domain.constants import MESSAGE_SYMBOL

logger = logging.getLogger(__name__)

PLUGIN_MODULE = "forbid_imports.infrastructure.checker"


class PylintAdapter:
    """Adapter over pylint.lint.Run."""

    @staticmethod
    def build_args(paths: list[str], options: dict[str, str | None]) -> list[str]:
        """Pylint argv: plugin loaded, every other message disabled, options forwarded."""
        args = [
            f"--load-plugins={PLUGIN_MODULE}",
            "--disable=all",
            f"--enable={MESSAGE_SYMBOL}",
            "--score=n",
        ]
        for option, value in options.items():
            if value is not None:
                args.append(f"--{option}={value}")
        return [*args, *paths]

    def run(self, paths: list[str], options: dict[str, str | None]) -> int:
        """Lint ``paths`` and return pylint's exit status bitmask."""
        args = self.build_args(paths, options)
        logger.debug("Running pylint %s", " ".join(args))
        result = Run(args, exit=False)
        return int(result.linter.msg_status)
