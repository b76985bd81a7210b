"""CLI entrypoint for quiz-solver — typer app with `ask`, `scan` and `describe` commands."""

import asyncio
import logging
import sys
from collections.abc import Callable
from pathlib import Path

import structlog
import typer

from quiz_solver.config.domain.config import SolverConfig
from quiz_solver.config.domain.dataset import DatasetConfig
from quiz_solver.config.domain.matching import MatchingConfig
from quiz_solver.config.infrastructure.observer import StructlogConfigObserver
from quiz_solver.config.infrastructure.yaml_loader import YamlConfigLoader
from quiz_solver.core.errors import QuizSolverError
from quiz_solver.dataset.domain.loader import DatasetLoader
from quiz_solver.dataset.infrastructure.json_loader import JsonDatasetLoader
from quiz_solver.dataset.infrastructure.observer import StructlogDatasetObserver
from quiz_solver.matching.domain.engine import rank_matches
from quiz_solver.matching.infrastructure.registry import create_similarity
from quiz_solver.ocr.domain.observer import OcrObserver
from quiz_solver.ocr.infrastructure.composite_observer import CompositeOcrObserver
from quiz_solver.ocr.infrastructure.observer import StructlogOcrObserver
from quiz_solver.ocr.infrastructure.progress_observer import ProgressOcrObserver
from quiz_solver.ocr.infrastructure.tesseract import TesseractTextExtractor
from quiz_solver.presentation.domain.formatter import format_confidence, missing_output
from quiz_solver.presentation.domain.help import field_help
from quiz_solver.presentation.domain.highlight import ansi_bold
from quiz_solver.presentation.domain.output import FormattedOutput
from quiz_solver.presentation.infrastructure.observer import StructlogHelpObserver
from quiz_solver.solver.application.pipeline import SolvePipeline
from quiz_solver.solver.application.solver import QuestionSolver
from quiz_solver.solver.infrastructure.observer import StructlogSolverObserver

app = typer.Typer(add_completion=False)

_FIELD_LABELS: list[tuple[str, str]] = [
    ("text", "Texto"),
    ("match", "Coincidencia"),
    ("confidence", "Confianza"),
    ("answer", "Respuesta"),
    ("explanation", "Explicación"),
]

_DIM = "\033[2m"
_RESET = "\033[0m"


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(
    config_path: Path | None,
    dataset_path: Path | None,
    threshold: float | None,
    enforce_threshold: bool,
) -> SolverConfig:
    """Build the session config from an optional YAML file plus CLI overrides."""
    if config_path is not None:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path, dataset_path=dataset_path
        )
    elif dataset_path is not None:
        config = SolverConfig(dataset=DatasetConfig(path=dataset_path))
    else:
        typer.echo("Either --config or --dataset is required.")
        raise typer.Exit(code=1)

    matching_overrides: dict[str, object] = {}
    if threshold is not None:
        matching_overrides["confidence_threshold"] = threshold
    if enforce_threshold:
        matching_overrides["enforce_threshold"] = True
    if matching_overrides:
        matching = MatchingConfig.model_validate(
            {**config.matching.model_dump(), **matching_overrides}
        )
        config = config.model_copy(update={"matching": matching})

    return config


def _build_solver(config: SolverConfig) -> QuestionSolver:
    loader: DatasetLoader = JsonDatasetLoader(observer=StructlogDatasetObserver())
    dataset = loader.load(config=config.dataset)
    matching = config.matching
    return QuestionSolver(
        dataset=dataset.as_mapping(),
        observer=StructlogSolverObserver(),
        similarity=create_similarity(matching.algorithm),
        threshold=matching.confidence_threshold if matching.enforce_threshold else None,
        highlight=ansi_bold,
    )


def _print_output(output: FormattedOutput, config: SolverConfig) -> None:
    label_w = max(len(label) for _, label in _FIELD_LABELS)
    for field, label in _FIELD_LABELS:
        typer.echo(f"{_DIM}{label:<{label_w}}{_RESET}  {getattr(output, field)}")

    threshold = format_confidence(config.matching.confidence_threshold)
    typer.echo(f"{_DIM}{'Umbral':<{label_w}}{_RESET}  {threshold}")


def _run_guarded(action: str, body: Callable[[], None]) -> None:
    """Run body, turning quiz-solver errors into a message and exit code 1."""
    try:
        body()
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo(f"{action} interrupted.")
        sys.exit(1)
    except QuizSolverError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to a solver config YAML"
)
_DATASET_OPTION = typer.Option(
    None, "--dataset", "-d", help="Path to the questions JSON (overrides config)"
)
_THRESHOLD_OPTION = typer.Option(
    None,
    "--threshold",
    "-t",
    min=0.0,
    max=1.0,
    help="Confidence threshold between 0 and 1 (overrides config)",
)
_ENFORCE_OPTION = typer.Option(
    False,
    "--enforce-threshold",
    help="Reject matches whose confidence is below the threshold",
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


@app.command()
def ask(
    question: str = typer.Argument(..., help="Question text to look up"),
    config_path: Path | None = _CONFIG_OPTION,
    dataset_path: Path | None = _DATASET_OPTION,
    threshold: float | None = _THRESHOLD_OPTION,
    enforce_threshold: bool = _ENFORCE_OPTION,
    top: int = typer.Option(
        0, "--top", min=0, help="Also list the N closest questions"
    ),
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Answer a typed question from the dataset."""

    def body() -> None:
        _configure_structlog(log_format=log_format)
        config = _load_config(
            config_path=config_path,
            dataset_path=dataset_path,
            threshold=threshold,
            enforce_threshold=enforce_threshold,
        )
        solver = _build_solver(config=config)

        if not question.strip():
            _print_output(output=missing_output(), config=config)
            return

        _print_output(output=solver.solve(question), config=config)

        if top > 0:
            typer.echo("")
            for match in rank_matches(
                input_text=question,
                dataset=solver.dataset,
                similarity=solver.similarity,
                limit=top,
            ):
                confidence = format_confidence(match.confidence)
                typer.echo(f"  {confidence:>8}  {match.question_text}")

    _run_guarded(action="Query", body=body)


@app.command()
def scan(
    image_path: Path = typer.Argument(..., help="Image containing the question"),
    config_path: Path | None = _CONFIG_OPTION,
    dataset_path: Path | None = _DATASET_OPTION,
    threshold: float | None = _THRESHOLD_OPTION,
    enforce_threshold: bool = _ENFORCE_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
) -> None:
    """Recognize a question in an image with Tesseract and answer it."""

    def body() -> None:
        _configure_structlog(log_format=log_format)
        config = _load_config(
            config_path=config_path,
            dataset_path=dataset_path,
            threshold=threshold,
            enforce_threshold=enforce_threshold,
        )
        solver = _build_solver(config=config)

        observers: list[OcrObserver] = [StructlogOcrObserver()]
        if log_format != "json":
            observers.append(ProgressOcrObserver())
        pipeline = SolvePipeline(
            extractor=TesseractTextExtractor(config=config.ocr),
            solver=solver,
            observer=CompositeOcrObserver(observers=observers),
        )

        outcome = asyncio.run(pipeline.run(image_path=image_path))
        _print_output(output=outcome.output, config=config)

    _run_guarded(action="Scan", body=body)


@app.command()
def describe(
    page: str = typer.Argument(..., help="'text-solver' or 'image-solver'"),
    field: str = typer.Argument(..., help="Field name, e.g. 'confidence'"),
) -> None:
    """Print the help text for one field of a solver page."""
    _configure_structlog(log_format="console")
    text = field_help(page=page, field=field, observer=StructlogHelpObserver())
    if text is None:
        typer.echo(f"No help available for field '{field}' on page '{page}'.")
        raise typer.Exit(code=1)
    typer.echo(text)


if __name__ == "__main__":
    app()
