"""
Voice Sentiment - CLI.

============================================================
RESPONSIBILITY
============================================================
Command-line interface for the sentiment analyzer.

- analyze      Analyze one text and print the result
- languages    List supported languages and speech locales
- interactive  Analyze lines from stdin through the voice pipeline
- serve        Run the HTTP API

============================================================
USAGE
============================================================
python -m voice_sentiment.cli analyze "I love this, it is very good"
python -m voice_sentiment.cli analyze --lang hi "यह शानदार है" --json
python -m voice_sentiment.cli interactive --lang ta --speak
python -m voice_sentiment.cli serve --port 8000

============================================================
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional, TextIO

from .config import LOG_FORMATS, LOG_LEVELS, Settings, load_settings
from .display import format_confidence, render_history_item, result_headline
from .exceptions import VoiceSentimentError
from .models import AnalysisResult, EmptyInput
from .pipeline import VoicePipeline
from .session import AnalysisSession
from .speech import LoggingSynthesizer, speak_message


logger = logging.getLogger(__name__)


# ============================================================
# LOGGING SETUP
# ============================================================

def setup_logging(level: str = "INFO", log_format: str = "text") -> None:
    """
    Set up logging on the root logger.

    Args:
        level: Log level
        log_format: Output format (json or text)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if log_format == "json":
        formatter = logging.Formatter(
            json.dumps({
                "timestamp": "%(asctime)s",
                "level": "%(levelname)s",
                "logger": "%(name)s",
                "message": "%(message)s",
            })
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [handler]


# ============================================================
# CLI ARGUMENT PARSER
# ============================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="voice-sentiment",
        description="Multi-language lexicon sentiment analyzer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze "I love this, it is very good"
  %(prog)s analyze --lang hi "यह शानदार है" --json
  %(prog)s languages
  %(prog)s interactive --lang ta --speak
        """
    )

    # --------------------------------------------------------
    # Logging Options
    # --------------------------------------------------------
    parser.add_argument(
        "--log-level",
        type=str,
        choices=list(LOG_LEVELS),
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--log-format",
        type=str,
        choices=list(LOG_FORMATS),
        default=None,
        help="Logging format (default: LOG_FORMAT or text)",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version="%(prog)s 1.0.0",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # --------------------------------------------------------
    # analyze
    # --------------------------------------------------------
    analyze_parser = subparsers.add_parser("analyze", help="Analyze one text")
    analyze_parser.add_argument("text", type=str, help="Text to analyze")
    analyze_parser.add_argument(
        "--lang", "-l",
        type=str,
        default=None,
        help="Language id (default: VOICE_SENTIMENT_DEFAULT_LANGUAGE or en)",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    analyze_parser.add_argument(
        "--speak",
        action="store_true",
        help="Also print the spoken message",
    )

    # --------------------------------------------------------
    # languages
    # --------------------------------------------------------
    subparsers.add_parser("languages", help="List supported languages")

    # --------------------------------------------------------
    # interactive
    # --------------------------------------------------------
    interactive_parser = subparsers.add_parser(
        "interactive",
        help="Analyze lines from stdin (:lang ID, :history, :speak, :quit)",
    )
    interactive_parser.add_argument("--lang", "-l", type=str, default=None)
    interactive_parser.add_argument(
        "--speak",
        action="store_true",
        help="Speak (log) every result",
    )

    # --------------------------------------------------------
    # serve
    # --------------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", type=str, default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


# ============================================================
# OUTPUT
# ============================================================

def format_result(result: AnalysisResult) -> str:
    """Human-readable result block."""
    buckets = result.buckets
    return "\n".join([
        result_headline(result.polarity, result.label),
        f"Confidence: {format_confidence(result.confidence)}%",
        f"Score: {result.total_score:.2f} ({result.total_words} words, "
        f"{result.sentence_count} sentences)",
        f"Chart: positive={buckets.positive:.2f} negative={buckets.negative:.2f} "
        f"neutral={buckets.neutral:.2f}",
    ])


# ============================================================
# COMMANDS
# ============================================================

def cmd_analyze(args: argparse.Namespace, session: AnalysisSession, settings: Settings, out: TextIO) -> int:
    outcome = session.analyze(args.text, args.lang)

    if isinstance(outcome, EmptyInput):
        if args.json:
            print(json.dumps(outcome.to_dict(), ensure_ascii=False), file=out)
        else:
            print(outcome.message, file=out)
        return 2

    spoken = None
    if args.speak or settings.speak_results:
        profile = session.analyzer.registry.resolve(outcome.language_id)
        spoken = speak_message(profile, outcome.label, outcome.confidence)

    if args.json:
        data = outcome.to_dict()
        if spoken is not None:
            data["spoken_message"] = spoken
        print(json.dumps(data, ensure_ascii=False), file=out)
    else:
        print(format_result(outcome), file=out)
        if spoken is not None:
            print(f"🔊 {spoken}", file=out)
    return 0


def cmd_languages(session: AnalysisSession, out: TextIO) -> int:
    registry = session.analyzer.registry
    for language_id in registry.languages():
        profile = registry.resolve(language_id)
        default = " (default)" if language_id == registry.default_language else ""
        labels = profile.labels
        print(
            f"{language_id:4s} {profile.locale:6s} "
            f"{labels.positive} / {labels.negative} / {labels.neutral}{default}",
            file=out,
        )
    return 0


async def run_interactive(
    session: AnalysisSession,
    speak: bool,
    stdin: TextIO,
    out: TextIO,
) -> int:
    """
    Read lines and analyze them through the voice pipeline.

    Commands: ':lang ID' switches language, ':history' prints recent
    results, ':speak' prints the message for the latest result,
    ':quit' exits. EOF also exits.
    """
    synthesizer = LoggingSynthesizer() if speak else None
    async with VoicePipeline(session, synthesizer=synthesizer) as pipeline:
        print(session.profile.messages.placeholder, file=out)
        while True:
            line = await asyncio.to_thread(stdin.readline)
            if not line:
                break
            line = line.rstrip("\n")
            command = line.strip()

            if command == ":quit":
                break
            if command.startswith(":lang"):
                language_id = session.set_language(command[len(":lang"):].strip())
                print(f"Language: {language_id} ({session.profile.locale})", file=out)
                print(session.profile.messages.placeholder, file=out)
                continue
            if command == ":history":
                for entry in session.history.entries():
                    print(render_history_item(entry), file=out)
                continue
            if command == ":speak":
                print(f"🔊 {session.speak_latest_message()}", file=out)
                continue

            await pipeline.submit(line, speak=speak)
            outcome = await pipeline.next_outcome()
            if outcome.is_empty:
                print(outcome.outcome.message, file=out)
                continue

            print(format_result(outcome.result), file=out)
            if outcome.spoken_message:
                print(f"🔊 {outcome.spoken_message}", file=out)
            if outcome.speech_error:
                print(f"⚠️ Speech unavailable: {outcome.speech_error}", file=out)
    return 0


def cmd_serve(args: argparse.Namespace, session: AnalysisSession) -> int:
    import uvicorn

    from .api import create_app

    uvicorn.run(create_app(session), host=args.host, port=args.port)
    return 0


# ============================================================
# MAIN ENTRY POINT
# ============================================================

def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (default: sys.argv[1:])

    Returns:
        Exit code (2 for empty input)
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    parser = create_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(
        level=args.log_level or settings.log_level,
        log_format=args.log_format or settings.log_format,
    )

    try:
        session = AnalysisSession.from_settings(settings)
    except VoiceSentimentError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.command == "analyze":
        return cmd_analyze(args, session, settings, out)
    if args.command == "languages":
        return cmd_languages(session, out)
    if args.command == "interactive":
        if args.lang:
            session.set_language(args.lang)
        speak = args.speak or settings.speak_results
        try:
            return asyncio.run(run_interactive(session, speak, stdin, out))
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            return 130
    if args.command == "serve":
        return cmd_serve(args, session)

    parser.error(f"Unknown command: {args.command}")
    return 1


# ============================================================
# MODULE EXECUTION
# ============================================================

if __name__ == "__main__":
    sys.exit(main())
