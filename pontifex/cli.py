"""Pontifex (Solitaire) 命令行界面.

提供加密、解密和生成随机牌组三个命令，
使用click处理参数校验和错误输出。
"""

import logging
from typing import Optional

import click

from .cipher import group_letters, process
from .core import CipherConfig, PontifexError
from .storage import generate_deck_file, load_deck

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _run_cipher(message: str, deck_path: str, literal: bool, group: bool,
                encrypting: bool) -> str:
    """加载牌组并执行加密或解密，错误转换为click异常."""
    config = CipherConfig.literal() if literal else CipherConfig.classic()
    try:
        deck = load_deck(deck_path, config)
    except PontifexError as e:
        raise click.ClickException(f"Failed to load deck: {e}") from e

    result = process(message, encrypting, deck)
    return group_letters(result) if group else result


deck_option = click.option(
    "--deck", "deck_path", required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON file containing deck order.",
)
literal_option = click.option(
    "--literal", is_flag=True,
    help="Use rank-only card values and modular joker wrap instead of classic Solitaire rules.",
)
group_option = click.option(
    "--group", is_flag=True,
    help="Print the result in blocks of five letters.",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--log-level", default="WARNING", show_default=True,
    envvar="PONTIFEX_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level.",
)
def main(log_level: str) -> None:
    """Pontifex Cipher (Solitaire).

    \b
    Example:
      pontifex encrypt "HELLO WORLD" --deck deck.json
      pontifex decrypt "CIPHERTEXT" --deck deck.json
      pontifex generate new_deck.json
    """
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)


@main.command()
@click.argument("message")
@deck_option
@literal_option
@group_option
def encrypt(message: str, deck_path: str, literal: bool, group: bool) -> None:
    """Encrypt a message."""
    click.echo(f"Ciphertext: {_run_cipher(message, deck_path, literal, group, True)}")


@main.command()
@click.argument("message")
@deck_option
@literal_option
@group_option
def decrypt(message: str, deck_path: str, literal: bool, group: bool) -> None:
    """Decrypt a message."""
    click.echo(f"Plaintext: {_run_cipher(message, deck_path, literal, group, False)}")


@main.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible deck.")
def generate(path: str, seed: Optional[int]) -> None:
    """Generate a random deck and save it to PATH."""
    try:
        generate_deck_file(path, seed)
    except PontifexError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Generated random deck saved to {path}")


if __name__ == "__main__":
    main()
