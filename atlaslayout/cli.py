"""
atlaslayout CLI - Command-line interface for inspecting and generating layouts
"""

import click
import sys
from pathlib import Path
from atlaslayout import AtlasLayout, Handle
from atlaslayout.exceptions import LayoutSerializationError
from atlaslayout.preview import save_layout_preview


def _load_layout(path):
    if not Path(path).exists():
        raise FileNotFoundError(f"Layout file not found: {path}")
    return AtlasLayout.load(path)


def _fail(message):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group()
@click.version_option()
def cli():
    """
    atlaslayout - Texture atlas layouts for sprite sheets.

    Examples:
        atlaslayout grid 16 16 8 4 -o hero.json
        atlaslayout info hero.json
        atlaslayout preview hero.json -o hero_overlay.png
    """
    pass


@cli.command()
@click.argument('tile_width', type=float)
@click.argument('tile_height', type=float)
@click.argument('columns', type=int)
@click.argument('rows', type=int)
@click.option('--padding', nargs=2, type=float, default=None, help='Gap between cells (X Y)')
@click.option('--offset', nargs=2, type=float, default=None, help='Offset of the whole grid (X Y)')
@click.option('-o', '--output', required=True, help='Output layout file (.json)')
@click.option('--verbose', '-v', is_flag=True, help='Print every generated section')
def grid(tile_width, tile_height, columns, rows, padding, offset, output, verbose):
    """
    Generate a uniform grid layout for a sprite sheet.

    Sections are numbered left to right, top to bottom.

    Examples:
        atlaslayout grid 16 16 4 2 -o walk.json
        atlaslayout grid 32 32 6 1 --padding 2 0 --offset 1 1 -o run.json
    """
    try:
        layout = AtlasLayout.from_grid(
            (tile_width, tile_height),
            columns,
            rows,
            padding=padding,
            offset=offset,
        )

        if verbose:
            for index, rect in enumerate(layout):
                click.echo(
                    f"  {index:4d}: ({rect.min.x:g}, {rect.min.y:g}) -> ({rect.max.x:g}, {rect.max.y:g})"
                )

        layout.save(output)
        click.secho(
            f"✓ Success! {len(layout)} sections, atlas {layout.size.x:g}x{layout.size.y:g}, saved to {output}",
            fg='green'
        )

    except LayoutSerializationError as e:
        _fail(f"Error: {e}")
    except OSError as e:
        _fail(f"Error: {e}")


@cli.command()
@click.argument('layout_path')
def info(layout_path):
    """
    Show size, section count and handle mapping of a layout.

    Examples:
        atlaslayout info hero.json
    """
    try:
        layout = _load_layout(layout_path)
    except FileNotFoundError as e:
        _fail(f"Error: {e}")
    except LayoutSerializationError as e:
        _fail(f"Invalid layout: {e}")

    click.echo(f"Size: {layout.size.x:g}x{layout.size.y:g}")
    click.echo(f"Sections: {len(layout)}")
    if layout.texture_handles is None:
        click.echo("Texture handles: none")
    else:
        click.echo(f"Texture handles: {len(layout.texture_handles)}")


@cli.command()
@click.argument('layout_path')
@click.argument('handle_index', type=int)
@click.argument('generation', type=int, default=0)
def lookup(layout_path, handle_index, generation):
    """
    Find the section index a source texture handle was packed into.

    Exits with status 1 when the handle is not in the layout.

    Examples:
        atlaslayout lookup packed.json 12
        atlaslayout lookup packed.json 12 3
    """
    try:
        layout = _load_layout(layout_path)
    except FileNotFoundError as e:
        _fail(f"Error: {e}")
    except LayoutSerializationError as e:
        _fail(f"Invalid layout: {e}")

    handle = Handle(handle_index, generation)
    index = layout.get_texture_index(handle)
    if index is None:
        _fail(f"{handle} not found")

    rect = layout.texture_rect(index)
    click.echo(f"{index} ({rect.min.x:g}, {rect.min.y:g}) -> ({rect.max.x:g}, {rect.max.y:g})")


@cli.command()
@click.argument('layout_path')
@click.option('-o', '--output', required=True, help='Output image (.png)')
@click.option('--scale', default=1, type=click.IntRange(min=1), help='Integer upscale factor')
def preview(layout_path, output, scale):
    """
    Render section outlines of a layout to a PNG overlay.

    Examples:
        atlaslayout preview hero.json -o hero_overlay.png --scale 4
    """
    try:
        layout = _load_layout(layout_path)
        save_layout_preview(layout, output, scale=scale)
        click.secho(f"✓ Success! Preview saved to {output}", fg='green')
    except FileNotFoundError as e:
        _fail(f"Error: {e}")
    except LayoutSerializationError as e:
        _fail(f"Invalid layout: {e}")
    except OSError as e:
        _fail(f"Error: {e}")


def main():
    """Entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
