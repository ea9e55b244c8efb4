"""Main CLI application using Typer."""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from typing_extensions import Annotated

from linguakit import __version__
from linguakit.core.interfaces import ConfigurationError, LinguaKitError
from linguakit.core.language import LanguageDetector, LanguageDetectorBuilder, identifiers
from linguakit.models.config import LinguaKitConfig

console = Console()
app = typer.Typer(
    name="linguakit",
    help="LinguaKit - natural-language detection from the command line",
    add_completion=False,
)

DEFAULT_CONFIG_PATHS = [
    Path("linguakit.toml"),
    Path.home() / ".config" / "linguakit" / "config.toml",
]

# Shared option types
LanguageOption = Annotated[
    Optional[List[str]],
    typer.Option("--language", "-l", help="Language name to detect (repeatable)"),
]
Iso1Option = Annotated[
    Optional[List[str]],
    typer.Option("--iso1", help="ISO 639-1 code to detect (repeatable)"),
]
Iso3Option = Annotated[
    Optional[List[str]],
    typer.Option("--iso3", help="ISO 639-3 code to detect (repeatable)"),
]
ExcludeOption = Annotated[
    Optional[List[str]],
    typer.Option("--exclude", "-x", help="Detect all languages except this one (repeatable)"),
]
ScriptOption = Annotated[
    Optional[str],
    typer.Option("--script", "-s", help="Restrict to languages written in a script (arabic/cyrillic/devanagari/latin)"),
]
MinDistanceOption = Annotated[
    Optional[float],
    typer.Option("--min-distance", help="Minimum relative distance (0.0-1.0)"),
]
PreloadOption = Annotated[
    bool,
    typer.Option("--preload", help="Load all language models up front"),
]
LowAccuracyOption = Annotated[
    bool,
    typer.Option("--low-accuracy", help="Enable low accuracy mode"),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Configuration file path", exists=True),
]
FormatOption = Annotated[
    Optional[str],
    typer.Option("--format", "-f", help="Output format (table/json)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Verbose output"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Quiet mode - log warnings only"),
]


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"LinguaKit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version and exit")
    ] = None,
):
    """LinguaKit - natural-language detection.

    Detect the language of texts, split mixed-language texts into spans
    and rank candidate languages by confidence.
    """
    pass


@app.command("languages")
def list_languages(
    script: ScriptOption = None,
    spoken: Annotated[
        bool,
        typer.Option("--spoken", help="Only languages that are still spoken")
    ] = False,
    unique_script: Annotated[
        bool,
        typer.Option("--unique-script", help="Only languages whose script no other language uses")
    ] = False,
    format: FormatOption = "table",
):
    """List supported languages.

    Examples:

      linguakit languages

      linguakit languages --script cyrillic --format json
    """
    try:
        if script:
            names = identifiers.languages_with_script(script)
        elif unique_script:
            names = identifiers.languages_with_single_unique_script()
        elif spoken:
            names = identifiers.spoken_languages()
        else:
            names = identifiers.languages()
    except LinguaKitError as e:
        _fail(e)

    if _output_format(format) == "json":
        typer.echo(json.dumps(names, ensure_ascii=False))
        return

    table = Table(title=f"Supported Languages ({len(names)})")
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("ISO 639-1", style="magenta")
    table.add_column("ISO 639-3", style="magenta")
    for name in names:
        language = identifiers.parse_language(name)
        table.add_row(name, language.iso_code_639_1.name.lower(), language.iso_code_639_3.name.lower())
    console.print(table)


@app.command()
def detect(
    texts: Annotated[
        List[str],
        typer.Argument(help="Texts to analyze")
    ],
    multiple: Annotated[
        bool,
        typer.Option("--multiple", "-m", help="Split each text into spans of different languages")
    ] = False,
    language: LanguageOption = None,
    iso1: Iso1Option = None,
    iso3: Iso3Option = None,
    exclude: ExcludeOption = None,
    script: ScriptOption = None,
    min_distance: MinDistanceOption = None,
    preload: PreloadOption = False,
    low_accuracy: LowAccuracyOption = False,
    config: ConfigOption = None,
    format: FormatOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
):
    """Detect the language of one or more texts.

    Examples:

      # Detect among all languages
      linguakit detect "Bonjour tout le monde"

      # Restrict the candidates and split mixed texts
      linguakit detect -l English -l French --multiple "Hello world. Bonjour le monde."
    """
    app_config = _load_config(config)
    _setup_logging(app_config, verbose, quiet)
    output_format = _output_format(format or app_config.output.format)

    try:
        detector = _build_detector(
            app_config, language, iso1, iso3, exclude, script, min_distance, preload, low_accuracy
        )

        if multiple:
            if len(texts) == 1:
                batches = [detector.detect_multiple_languages(texts[0])]
            else:
                batches = detector.detect_multiple_languages_in_parallel(texts)
        else:
            if len(texts) == 1:
                detected = [detector.detect_language(texts[0])]
            else:
                detected = detector.detect_languages_in_parallel(texts)
    except LinguaKitError as e:
        _fail(e)

    if multiple:
        if output_format == "json":
            payload = [
                {"text": text, "spans": [span.model_dump() for span in spans]}
                for text, spans in zip(texts, batches)
            ]
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim")
        table.add_column("Language", style="cyan", no_wrap=True)
        table.add_column("Start", justify="right")
        table.add_column("End", justify="right")
        table.add_column("Span", style="white")
        for number, (text, spans) in enumerate(zip(texts, batches), 1):
            for span in spans:
                table.add_row(str(number), span.language, str(span.start_index), str(span.end_index), span.extract(text))
        console.print(table)
        return

    if output_format == "json":
        payload = [{"text": text, "language": name} for text, name in zip(texts, detected)]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Text", style="white")
    table.add_column("Language", style="cyan", no_wrap=True)
    for text, name in zip(texts, detected):
        table.add_row(text, name or "unknown")
    console.print(table)


@app.command()
def confidence(
    texts: Annotated[
        List[str],
        typer.Argument(help="Texts to analyze")
    ],
    target: Annotated[
        Optional[str],
        typer.Option("--target", "-t", help="Only report the confidence for this language")
    ] = None,
    top: Annotated[
        int,
        typer.Option("--top", help="Number of ranked languages to show per text (0 for all)")
    ] = 5,
    language: LanguageOption = None,
    iso1: Iso1Option = None,
    iso3: Iso3Option = None,
    exclude: ExcludeOption = None,
    script: ScriptOption = None,
    min_distance: MinDistanceOption = None,
    preload: PreloadOption = False,
    low_accuracy: LowAccuracyOption = False,
    config: ConfigOption = None,
    format: FormatOption = None,
    verbose: VerboseOption = False,
    quiet: QuietOption = False,
):
    """Rank candidate languages by confidence.

    Examples:

      linguakit confidence -l English -l French "Bonjour tout le monde"

      linguakit confidence --target German "Guten Morgen" "Good morning"
    """
    app_config = _load_config(config)
    _setup_logging(app_config, verbose, quiet)
    output_format = _output_format(format or app_config.output.format)

    try:
        detector = _build_detector(
            app_config, language, iso1, iso3, exclude, script, min_distance, preload, low_accuracy
        )

        if target:
            scores = detector.compute_language_confidence_in_parallel(texts, target)
            target_name = identifiers.canonical_name(identifiers.parse_language(target))
        else:
            rankings = detector.compute_language_confidence_values_in_parallel(texts)
    except LinguaKitError as e:
        _fail(e)

    if target:
        if output_format == "json":
            payload = [
                {"text": text, "language": target_name, "confidence": score}
                for text, score in zip(texts, scores)
            ]
            typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
            return

        table = Table(title=f"{target_name} confidence", show_header=True, header_style="bold magenta")
        table.add_column("Text", style="white")
        table.add_column("Confidence", justify="right", style="cyan")
        for text, score in zip(texts, scores):
            table.add_row(text, f"{score:.4f}")
        console.print(table)
        return

    if top > 0:
        rankings = [values[:top] for values in rankings]

    if output_format == "json":
        payload = [
            {"text": text, "confidences": [value.model_dump() for value in values]}
            for text, values in zip(texts, rankings)
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for text, values in zip(texts, rankings):
        table = Table(title=text, show_header=True, header_style="bold magenta")
        table.add_column("Language", style="cyan", no_wrap=True)
        table.add_column("Confidence", justify="right")
        for value in values:
            table.add_row(value.language, f"{value.value:.4f}")
        console.print(table)


@app.command()
def config(
    path: Annotated[
        Optional[Path],
        typer.Option("--path", "-p", help="Configuration file (default: first of ./linguakit.toml, ~/.config/linguakit/config.toml)")
    ] = None,
    init: Annotated[
        bool,
        typer.Option("--init", help="Write a configuration file with the default settings")
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing file with --init")
    ] = False,
    output_format: FormatOption = "table",
):
    """Print the effective configuration, or write a default one with --init.

    Examples:

      linguakit config
      linguakit config --path project.toml --format json
      linguakit config --init --path ~/.config/linguakit/config.toml
    """
    output_format = _output_format(output_format)

    if init:
        target = path or DEFAULT_CONFIG_PATHS[0]
        if target.exists() and not force:
            console.print(f"❌ {target} already exists; pass --force to replace it", style="red")
            raise typer.Exit(1)
        LinguaKitConfig().to_file(target)
        console.print(f"✅ Wrote default configuration to {target}", style="green")
        return

    source = _find_config(path)
    if path and source is None:
        console.print(f"❌ Configuration file not found: {path}", style="red")
        raise typer.Exit(1)
    app_config = _load_config(source)

    if output_format == "json":
        typer.echo(json.dumps({
            "source": str(source) if source else None,
            "config": app_config.model_dump(exclude_none=True),
        }, indent=2))
        return

    console.print(f"Source: {source or 'built-in defaults'}", style="blue")
    _display_config(app_config)


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Configuration file to validate")
    ],
):
    """Validate a LinguaKit configuration file.

    The detector section is checked by creating a builder from it, so
    unknown languages and codes are reported without loading any models.
    """
    if not config_file.exists():
        console.print(f"❌ Configuration file not found: {config_file}", style="red")
        raise typer.Exit(1)

    try:
        app_config = LinguaKitConfig.from_file(config_file)
        builder = LanguageDetectorBuilder.from_config(app_config)
    except LinguaKitError as e:
        console.print(f"❌ Configuration validation failed: {e}", style="red")
        raise typer.Exit(1)

    console.print(f"✅ Configuration file is valid: {config_file}", style="green")
    console.print(f"Languages: {len(builder.languages)}")
    console.print(f"Minimum relative distance: {builder.configuration.minimum_relative_distance}")


def _find_config(config_path: Optional[Path]) -> Optional[Path]:
    """Return the explicit config path if it exists, else the first default that does."""
    candidates = [config_path] if config_path else DEFAULT_CONFIG_PATHS
    return next((candidate for candidate in candidates if candidate.exists()), None)


def _load_config(config_path: Optional[Path]) -> LinguaKitConfig:
    """Load the explicit config file, a default one, or built-in defaults."""
    source = _find_config(config_path)
    if source is None:
        return LinguaKitConfig()
    try:
        return LinguaKitConfig.from_file(source)
    except ConfigurationError as e:
        console.print(f"❌ Error loading configuration: {e}", style="red")
        raise typer.Exit(1)


def _setup_logging(app_config: LinguaKitConfig, verbose: bool, quiet: bool) -> None:
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = getattr(logging, app_config.output.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def _build_detector(
    app_config: LinguaKitConfig,
    language: Optional[List[str]],
    iso1: Optional[List[str]],
    iso3: Optional[List[str]],
    exclude: Optional[List[str]],
    script: Optional[str],
    min_distance: Optional[float],
    preload: bool,
    low_accuracy: bool,
) -> LanguageDetector:
    """Apply command-line overrides to the configuration and build a detector."""
    section = app_config.detector

    # Any language selection on the command line replaces the configured one
    if language or iso1 or iso3 or exclude or script:
        section.languages = list(language or [])
        section.iso_codes_639_1 = list(iso1 or [])
        section.iso_codes_639_3 = list(iso3 or [])
        section.exclude = list(exclude or [])
        section.script = script
        section.spoken_only = False

    if min_distance is not None:
        section.minimum_relative_distance = min_distance
    if preload:
        section.preload_language_models = True
    if low_accuracy:
        section.low_accuracy_mode = True

    return LanguageDetectorBuilder.from_config(app_config).build()


def _output_format(value: str) -> str:
    value = value.lower()
    if value not in ("table", "json"):
        console.print(f"❌ Error: Unsupported format '{value}'. Use: table or json", style="red")
        raise typer.Exit(1)
    return value


def _display_config(app_config: LinguaKitConfig) -> None:
    section = app_config.detector

    table = Table(title="LinguaKit Configuration")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("Languages", ", ".join(section.languages) or "-")
    table.add_row("ISO 639-1 Codes", ", ".join(section.iso_codes_639_1) or "-")
    table.add_row("ISO 639-3 Codes", ", ".join(section.iso_codes_639_3) or "-")
    table.add_row("Excluded", ", ".join(section.exclude) or "-")
    table.add_row("Script", section.script or "-")
    table.add_row("Spoken Only", str(section.spoken_only))
    table.add_row("Minimum Relative Distance", str(section.minimum_relative_distance))
    table.add_row("Preload Models", str(section.preload_language_models))
    table.add_row("Low Accuracy Mode", str(section.low_accuracy_mode))
    table.add_row("Output Format", app_config.output.format)
    table.add_row("Log Level", app_config.output.log_level)

    console.print(table)


def _fail(error: Exception) -> None:
    console.print(f"❌ Error: {error}", style="red")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
