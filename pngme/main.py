import click

from pngme import commands
from pngme.args import DecodeArgs, EncodeArgs, RemoveArgs, generate_args
from pngme.errors import PngError
from pngme.logging_config import setup_logging


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("command")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.argument("chunk_type", required=False)
@click.argument("message", required=False)
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the result here instead of FILE")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR (default: $LOG_LEVEL)")
def cli(command, file, chunk_type, message, output, log_level):
    """Hide a MESSAGE in a PNG FILE under CHUNK_TYPE, read it back or remove it.

    \b
      pngme encode FILE CHUNK_TYPE MESSAGE
      pngme decode FILE CHUNK_TYPE
      pngme remove FILE CHUNK_TYPE
      pngme print  FILE
    """
    setup_logging("pngme", log_level=log_level)

    try:
        args = generate_args(command, file, chunk_type, message, output)
        result = commands.run(args)
    except PngError as e:
        raise click.ClickException(str(e))

    if isinstance(args, EncodeArgs):
        click.echo(f"Added chunk {result.chunk_type} to {args.output or args.file}")
    elif isinstance(args, DecodeArgs):
        click.echo(result)
    elif isinstance(args, RemoveArgs):
        click.echo(f"Removed chunk {result.chunk_type} from {args.output or args.file}")
    else:
        for line in result:
            click.echo(line)


if __name__ == "__main__":
    cli()
