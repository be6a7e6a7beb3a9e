"""
CLI interface for Passforge password generator.
"""

import logging
import sys
import click
from typing import Optional

from .clipboard import DEFAULT_CLEAR_AFTER, clear_clipboard, copy_to_clipboard
from .exceptions import ClipboardError, PassforgeException
from .utils.alphabets import CLASS_ORDER, get_alphabet
from .utils.password_generator import DEFAULT_OPTIONS, PasswordConfig, PasswordGenerator
from .utils.random_source import (
    DefaultRandomSource,
    RandomSource,
    SecureRandomSource,
    get_default_source,
)
from .utils.validation import MAX_LENGTH, MIN_LENGTH, get_validation_error_message


class GeneratorContext:
    """Context object for sharing the random source across commands."""

    def __init__(self, seed: Optional[int] = None, secure: bool = False):
        self.seed = seed
        self.secure = secure
        self.source: RandomSource = self._build_source()

    def _build_source(self) -> RandomSource:
        if self.secure:
            return SecureRandomSource()
        if self.seed is not None:
            return DefaultRandomSource(self.seed)
        return get_default_source()

    def describe_source(self) -> str:
        if self.secure:
            return "system CSPRNG"
        if self.seed is not None:
            return f"seeded Mersenne Twister (seed {self.seed})"
        return "Mersenne Twister"


@click.group()
@click.option("--seed", type=int, default=None, help="Seed the random source for reproducible output")
@click.option("--secure", is_flag=True, help="Use the operating system CSPRNG")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, seed: Optional[int], secure: bool, verbose: bool) -> None:
    """Passforge - Random password generator."""
    if seed is not None and secure:
        click.echo("Error: Cannot use --seed with --secure", err=True)
        sys.exit(1)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj = GeneratorContext(seed=seed, secure=secure)


@cli.command()
@click.option(
    "--length", "-n",
    default=DEFAULT_OPTIONS["length"],
    type=click.IntRange(MIN_LENGTH, MAX_LENGTH, clamp=True),
    help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, default: {DEFAULT_OPTIONS['length']})",
)
@click.option("--no-lower", is_flag=True, help="Exclude lowercase letters")
@click.option("--no-upper", is_flag=True, help="Exclude uppercase letters")
@click.option("--no-digits", is_flag=True, help="Exclude digits")
@click.option("--no-special", is_flag=True, help="Exclude special characters")
@click.option("--allow-ambiguous", is_flag=True, help="Allow ambiguous characters (O, 0, |)")
@click.option("--count", "-c", default=1, type=click.IntRange(1, 100), help="Number of passwords (default: 1)")
@click.option("--copy", is_flag=True, help="Copy the last password to the clipboard")
@click.option(
    "--clear-after",
    default=DEFAULT_CLEAR_AFTER,
    type=click.IntRange(min=0),
    help=f"Seconds before the copied password is cleared, 0 to keep it (default: {DEFAULT_CLEAR_AFTER})",
)
@click.pass_obj
def generate(gen_ctx: GeneratorContext, length: int, no_lower: bool, no_upper: bool,
             no_digits: bool, no_special: bool, allow_ambiguous: bool, count: int,
             copy: bool, clear_after: int) -> None:
    """Generate one or more passwords."""
    config = PasswordConfig(
        length=length,
        use_lower=not no_lower,
        use_upper=not no_upper,
        use_digits=not no_digits,
        use_special=not no_special,
        avoid_ambiguous=not allow_ambiguous,
    )

    error_msg = get_validation_error_message(config)
    if error_msg:
        click.echo(f"Error: {error_msg}", err=True)
        sys.exit(1)

    generator = PasswordGenerator(config, gen_ctx.source)
    click.echo(
        f"🔐 Generating {length}-character password{'s' if count > 1 else ''} "
        f"using: {generator.get_charset_info()}",
        err=True,
    )

    password = ""
    try:
        for _ in range(count):
            password = generator.generate_or_raise()
            click.echo(password)
    except PassforgeException as e:
        click.echo(f"Error generating password: {e}", err=True)
        sys.exit(1)

    if copy:
        try:
            clear_thread = copy_to_clipboard(password, clear_after=clear_after)
        except ClipboardError as e:
            click.echo(f"❌ {e}", err=True)
            return

        click.echo("✅ Password copied to clipboard.", err=True)
        if clear_thread is None:
            return

        click.echo(
            f"⏳ Clipboard will be cleared in {clear_after} seconds (Ctrl-C to clear now).",
            err=True,
        )
        try:
            clear_thread.join()
        except KeyboardInterrupt:
            clear_clipboard(password)
        click.echo("🧹 Clipboard cleared.", err=True)


@cli.command()
@click.option("--allow-ambiguous", is_flag=True, help="Show alphabets including ambiguous characters")
@click.pass_obj
def charsets(gen_ctx: GeneratorContext, allow_ambiguous: bool) -> None:
    """Show the character alphabets in effect."""
    for char_class in CLASS_ORDER:
        alphabet = get_alphabet(char_class, avoid_ambiguous=not allow_ambiguous)
        click.echo(f"  {char_class.value:<10} ({len(alphabet):>2}) {alphabet}")
    click.echo(f"Random source: {gen_ctx.describe_source()}")


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
