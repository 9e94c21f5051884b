"""CLI for mytranslation - translate sentences through MyTranslationService."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from .config import build_config, get_default_config
from .translation.exceptions import (
    MyTranslationServiceError,
    UnsupportedTargetLanguageError,
)
from .translation.lang_codes import get_language_name

__all__ = ["setup_logging", "main"]


def setup_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure logging for CLI output.

    Args:
        verbose: If True, enable DEBUG level logging
        level: Level name used when not verbose
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


# =============================================================================
# Subcommand: providers
# =============================================================================

def cmd_providers(args: argparse.Namespace) -> int:
    """List available translation providers."""
    from .translation.factory import ProviderFactory
    from .translation.metadata import ProviderMetadata

    provider_ids = ProviderFactory.list_available_providers()
    if not provider_ids:
        print("No providers found.")
        return 0

    for pid in provider_ids:
        info = ProviderMetadata.get(pid)
        print(f"{pid}: {info.display_name} - {info.description}")
    return 0


# =============================================================================
# Subcommand: translate
# =============================================================================

def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map CLI options onto the translation config section."""
    return {
        "translation": {
            "provider": args.provider,
            "target_language": args.target_lang,
            "source_language": args.source_lang,
            "max_retries": args.max_retries,
            "base_delay": args.base_delay,
        }
    }


def cmd_translate(args: argparse.Namespace) -> int:
    """Translate a sentence."""
    from .translation.factory import ProviderFactory
    from .translation.retry import RetryPolicy

    try:
        config = build_config(_config_overrides(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    translation_config = config["translation"]

    try:
        service = ProviderFactory.create_service(
            translation_config["provider"],
            source_lang=translation_config["source_language"],
            retry_policy=RetryPolicy.from_config(translation_config),
        )
        print(
            service.translate_with_google(
                args.sentence, translation_config["target_language"]
            )
        )
    except UnsupportedTargetLanguageError as e:
        supported = get_language_name(e.supported)
        print(f"Error: {e}. Use --to {e.supported} ({supported}).", file=sys.stderr)
        return 1
    except MyTranslationServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


# =============================================================================
# Main entry point
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    defaults = get_default_config()

    parser = argparse.ArgumentParser(
        prog="mytranslation",
        description="Translate sentences with Google Translate.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # providers command
    providers_parser = subparsers.add_parser("providers", help="List translation providers")
    providers_parser.set_defaults(func=cmd_providers)

    # translate command
    translate_parser = subparsers.add_parser("translate", help="Translate a sentence")
    translate_parser.add_argument("sentence", help="Sentence to translate")
    translate_parser.add_argument(
        "--to",
        dest="target_lang",
        help=f"Target language code (default: {defaults['translation']['target_language']})",
    )
    translate_parser.add_argument(
        "--provider",
        help=f"Provider ID (default: {defaults['translation']['provider']})",
    )
    translate_parser.add_argument(
        "--source",
        dest="source_lang",
        help=f"Source language code (default: {defaults['translation']['source_language']})",
    )
    translate_parser.add_argument(
        "--max-retries",
        type=int,
        help=f"Maximum request attempts (default: {defaults['translation']['max_retries']})",
    )
    translate_parser.add_argument(
        "--base-delay",
        type=float,
        help=f"Initial retry delay in seconds (default: {defaults['translation']['base_delay']})",
    )
    # SUPPRESS keeps the top-level -v value unless given after the subcommand
    translate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable debug logging",
    )
    translate_parser.set_defaults(func=cmd_translate)

    args = parser.parse_args(argv)

    # No command specified - show help
    if args.command is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose, defaults["logging"]["console_log_level"])
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
