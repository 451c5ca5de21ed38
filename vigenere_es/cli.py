"""
Command-line interface for the Spanish Vigenère cipher.

Usage::

    vigenere-es encrypt mensaje.txt cifrado.txt --key LIMON
    vigenere-es decrypt cifrado.txt --key LIMON
    vigenere-es crack cifrado.txt --seed 7
    vigenere-es serve --port 8000

Files are read and written as UTF-8.
"""

from pathlib import Path
from typing import Optional

import click

from vigenere_es.core.config import get_settings
from vigenere_es.core.exceptions import CryptanalysisError
from vigenere_es.core.logging_config import configure_logging
from vigenere_es.models.schemas import KeyLengthStrategy
from vigenere_es.services.engines.vigenere import VigenereEngine


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _write(text: str, output: Optional[Path]) -> None:
    if output is None:
        click.echo(text)
    else:
        output.write_text(text, encoding="utf-8")


def _preview(text: str, length: int) -> str:
    return text if len(text) <= length else text[:length] + "..."


@click.group()
@click.option("--log-level", default=None, help="Logging level (defaults to settings).")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Encrypt, decrypt and break Vigenère ciphertexts over the Spanish alphabet."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level)
    ctx.obj = VigenereEngine.from_settings(settings)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--key", "-k", required=True, help="Keyword made of the letters A-Z and Ñ.")
@click.pass_obj
def encrypt(engine: VigenereEngine, source: Path, output: Optional[Path], key: str) -> None:
    """Encrypt SOURCE (uppercased first) and write it to OUTPUT or stdout."""
    try:
        _write(engine.encrypt(_read(source), key), output)
    except CryptanalysisError as e:
        raise click.ClickException(e.message)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--key", "-k", required=True, help="Keyword made of the letters A-Z and Ñ.")
@click.pass_obj
def decrypt(engine: VigenereEngine, source: Path, output: Optional[Path], key: str) -> None:
    """Decrypt SOURCE with a known key and write it to OUTPUT or stdout."""
    try:
        _write(engine.decrypt_with_key(_read(source), key).plaintext, output)
    except CryptanalysisError as e:
        raise click.ClickException(e.message)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--seed", type=int, default=None, help="Seed for the sampled strategy.")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in KeyLengthStrategy]),
    default=None,
    help="How trial periods are scored.",
)
@click.option("--max-key-length", type=click.IntRange(min=1), default=None)
@click.option("--key-length", type=click.IntRange(min=1), default=None, help="Skip estimation.")
@click.option("--preview", type=click.IntRange(min=1), default=50, show_default=True)
@click.pass_obj
def crack(
    engine: VigenereEngine,
    source: Path,
    seed: Optional[int],
    strategy: Optional[str],
    max_key_length: Optional[int],
    key_length: Optional[int],
    preview: int,
) -> None:
    """Recover the key of SOURCE and print the decrypted text."""
    ciphertext = _read(source)
    options = {
        "seed": seed,
        "strategy": strategy,
        "max_key_length": max_key_length,
        "key_length": key_length,
    }

    try:
        result = engine.find_key_and_decrypt(ciphertext, options)
    except CryptanalysisError as e:
        raise click.ClickException(e.message)

    click.echo(f"Cipher text: {_preview(ciphertext, preview)}")
    click.echo(f"Key length: {result.key_length}")
    click.echo(f"Key (guess): {result.key}")
    click.echo(f"Confidence: {result.confidence:.2f}")
    click.echo(f"Original message: {_preview(result.plaintext, preview)}")


@cli.command()
@click.option("--host", default="0.0.0.0", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    from vigenere_es.main import run

    run(host=host, port=port)


def main() -> None:
    cli()
