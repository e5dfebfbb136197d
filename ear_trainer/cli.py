"""Command-line interface for Ear Trainer.

Provides commands for:
- levels: List the curriculum
- chords: Show the chord table and its voicings
- transpose: Transpose notes from C into a key
- question: Generate one question, optionally exported to MIDI/MusicXML/WAV
- play: Interactive quiz for one level
"""

import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core import (
    CORRECT_POINTS,
    WRONG_PENALTY,
    EarTrainerError,
    LevelConfigError,
)
from .levels import DEFAULT_CATALOG, LevelCatalog
from .session import ChordProgression, QuestionGenerator, QuizConfig, QuizSession
from .theory import CHORD_TABLE, KEYS, Inversion, transpose

app = typer.Typer(
    name="ear-trainer",
    help="Chord Progression Ear Training",
    rich_markup_mode="markdown",
)
console = Console()


def _load_catalog(path: Optional[Path]) -> LevelCatalog:
    """Load a catalog file, or the built-in catalog when no path is given."""
    if path is None:
        return DEFAULT_CATALOG
    try:
        return LevelCatalog.from_json(path)
    except FileNotFoundError:
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)
    except (LevelConfigError, ValueError) as e:
        console.print(f"[red]Error: Invalid level catalog {path}: {e}[/red]")
        raise typer.Exit(1)


def _check_key(key: Optional[str]) -> None:
    if key is not None and key not in KEYS:
        console.print(f"[red]Error: Unknown key {key!r}. Use one of: {' '.join(KEYS)}[/red]")
        raise typer.Exit(1)


@app.command()
def levels(
    catalog_file: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="JSON level catalog (default: built-in)"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output the catalog as JSON (for scripting)"
    ),
):
    """List the levels of the curriculum."""
    catalog = _load_catalog(catalog_file)

    if json_output:
        console.print_json(data=catalog.to_records())
        return

    table = Table(title="Levels")
    table.add_column("Level", style="cyan")
    table.add_column("Chords", style="green")
    table.add_column("Chords/Question", style="yellow")
    table.add_column("Questions", style="yellow")
    table.add_column("Max Score", style="magenta")
    table.add_column("Description")

    for level in catalog:
        table.add_row(
            str(level.number),
            " ".join(level.available_chords),
            str(level.chords_per_question),
            str(level.questions_per_level),
            str(level.max_score),
            level.description,
        )

    console.print(table)
    console.print(
        f"[dim]Scoring: {CORRECT_POINTS:+d} per correct answer, "
        f"{WRONG_PENALTY:+d} per wrong answer[/dim]"
    )


@app.command()
def chords(
    key: str = typer.Option("C", "--key", "-k", help="Key to show voicings in"),
):
    """Show the chord table with all inversions."""
    _check_key(key)

    table = Table(title=f"Chords in {key}")
    table.add_column("Roman", style="cyan")
    table.add_column("Name (in C)", style="green")
    for inversion in Inversion:
        table.add_column(inversion.value.capitalize(), style="yellow")

    for roman, chord in CHORD_TABLE.items():
        table.add_row(
            roman,
            chord.name,
            *(" ".join(transpose(chord.voicing(inv), key)) for inv in Inversion),
        )

    console.print(table)


@app.command(name="transpose")
def transpose_notes(
    notes: List[str] = typer.Argument(..., help="Notes in C, e.g. C4 E4 G4"),
    key: str = typer.Option(..., "--key", "-k", help="Target key"),
):
    """Transpose notes written in C into another key."""
    try:
        result = transpose(notes, key)
    except EarTrainerError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(" ".join(str(n) for n in result))


@app.command()
def question(
    level: int = typer.Option(1, "--level", "-l", help="Level number"),
    key: Optional[str] = typer.Option(
        None, "--key", "-k", help="Key of the question (default: random)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    catalog_file: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="JSON level catalog (default: built-in)"
    ),
    midi: Optional[Path] = typer.Option(None, "--midi", help="Write the question to a MIDI file"),
    musicxml: Optional[Path] = typer.Option(
        None, "--musicxml", help="Write the question to a MusicXML file"
    ),
    wav: Optional[Path] = typer.Option(None, "--wav", help="Render the question to a WAV file"),
    waveform: str = typer.Option("sine", "--waveform", "-w", help="sine, square, sawtooth or triangle"),
    json_output: bool = typer.Option(
        False, "--json", help="Output the question as JSON (for scripting)"
    ),
):
    """Generate one chord-progression question.

    Examples:
        ear-trainer question --level 3 --key D
        ear-trainer question -l 5 --midi question.mid
    """
    catalog = _load_catalog(catalog_file)
    _check_key(key)

    if catalog.get_level(level) is None:
        console.print(f"[red]Error: No level {level}. Available: {catalog.numbers}[/red]")
        raise typer.Exit(1)

    generator = QuestionGenerator(catalog, rng=random.Random(seed))
    progression = generator.generate(level, key)

    options = _sound_options(waveform)
    _export(
        progression,
        midi=midi,
        musicxml=musicxml,
        wav=wav,
        options=options,
        quiet=json_output,
    )

    if json_output:
        console.print_json(data=progression.to_dict())
        return

    console.print(f"\n[bold blue]Level {level} - key of {progression.key}[/bold blue]\n")
    _show_progression_table(progression)


@app.command()
def play(
    level: int = typer.Option(1, "--level", "-l", help="Level number"),
    key: str = typer.Option("C", "--key", "-k", help="Key of every question"),
    random_key: bool = typer.Option(
        False, "--random-key", "-r", help="Pick a random key for each question"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    no_repeats: bool = typer.Option(
        False, "--no-repeats", help="Never play the same chord twice in a row"
    ),
    catalog_file: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="JSON level catalog (default: built-in)"
    ),
    audio_dir: Optional[Path] = typer.Option(
        None, "--audio-dir", "-a", help="Render each question to a WAV file in this directory"
    ),
    show_notes: bool = typer.Option(
        True, "--show-notes/--hide-notes", help="Print the notes of each question"
    ),
):
    """Play a level: name each progression with roman numerals (e.g. `I IV V`)."""
    catalog = _load_catalog(catalog_file)
    _check_key(key)

    config = QuizConfig(
        level=level,
        key=key,
        random_key=random_key,
        seed=seed,
        allow_repeats=not no_repeats,
    )
    try:
        session = QuizSession(config, catalog)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(
        f"\n[bold blue]Level {session.level.number}: {session.level.description}[/bold blue]"
    )
    console.print(f"   Chords: {' '.join(session.level.available_chords)}")
    console.print(f"   Questions: {session.level.questions_per_level}\n")

    while not session.finished:
        progression = session.next_question()
        console.print(
            f"[cyan]Question {session.question_index}/{session.level.questions_per_level}"
            f" (key of {progression.key})[/cyan]"
        )

        if audio_dir is not None:
            wav = audio_dir / f"question_{session.question_index:02d}.wav"
            _export(progression, wav=wav, quiet=True)
            console.print(f"   [dim]Audio: {wav}[/dim]")
        if show_notes:
            for voicing in progression.voicings:
                console.print(f"   {' '.join(voicing)}")

        guess = typer.prompt(f"   Your answer ({len(progression.chords)} chords)")
        if session.answer(guess):
            console.print(f"   [green]Correct! ({CORRECT_POINTS:+d})[/green]")
        else:
            console.print(
                f"   [red]Wrong ({WRONG_PENALTY:+d}). "
                f"Answer: {' '.join(progression.chords)}[/red]"
            )
        console.print(f"   Score: {session.score}\n")

    summary = session.summary()
    console.print("[bold]Results:[/bold]")
    console.print(f"  Correct: {summary['correct']}")
    console.print(f"  Wrong: {summary['wrong']}")
    console.print(f"  [bold]Score: {summary['score']} / {summary['max_score']}[/bold]")

    upcoming = catalog.next_level(session.level.number)
    if upcoming is not None and summary["score"] == summary["max_score"]:
        console.print(f"\n[green]Perfect! Try level {upcoming.number} next.[/green]")


def _sound_options(waveform: str):
    """Validate the waveform before anything is written."""
    from .output import SoundOptions

    try:
        return SoundOptions(waveform=waveform)
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _export(
    progression: ChordProgression,
    midi: Optional[Path] = None,
    musicxml: Optional[Path] = None,
    wav: Optional[Path] = None,
    options=None,
    quiet: bool = False,
) -> None:
    """Write a progression to every requested output format.

    With ``quiet`` set, nothing is printed so JSON output stays parseable.
    """
    if midi is not None:
        from .output import MIDIExporter

        MIDIExporter().export(progression, str(midi))
        if not quiet:
            console.print(f"[green]MIDI saved to {midi}[/green]")

    if musicxml is not None:
        from .output import MusicXMLExporter

        MusicXMLExporter().export(progression, str(musicxml))
        if not quiet:
            console.print(f"[green]MusicXML saved to {musicxml}[/green]")

    if wav is not None:
        from .output import WaveRenderer

        WaveRenderer(options).export(progression, str(wav))
        if not quiet:
            console.print(f"[green]WAV saved to {wav}[/green]")


def _show_progression_table(progression: ChordProgression):
    """Display a progression in a table."""
    table = Table(title="Progression")
    table.add_column("#", style="cyan")
    table.add_column("Roman", style="green")
    table.add_column("Notes", style="yellow")

    for index, (roman, voicing) in enumerate(
        zip(progression.chords, progression.voicings), start=1
    ):
        table.add_row(str(index), roman, " ".join(voicing))

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
