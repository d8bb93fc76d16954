"""CLI interface for tiffhax -- header, fields, entry subcommands."""

import json
import sys
from pathlib import Path

import click

import tiffhax
from tiffhax import log
from tiffhax.describe import (
    describe_data, describe_field, describe_offset, field_name, type_name,
)
from tiffhax.directory import read_directory, read_header
from tiffhax.errors import RegionError, TiffHaxError
from tiffhax.field import read_field_at


def _fail(msg):
    click.echo(log.cli_error(f'Error: {msg}'), err=True)
    sys.exit(1)


def _entry_json(field, offset, data):
    item = {
        'start': field.start,
        'end': field.end,
        'raw': field.raw.hex(),
        'tag_id': field.tag_id,
        'tag_name': field_name(field.tag_id),
        'dtype': field.dtype,
        'type_name': type_name(field.dtype),
        'count': field.count,
        'value': field.value,
        'is_offset': field.is_offset,
        'offset': None,
        'data': None,
    }
    if offset is not None:
        item['offset'] = {'to': offset.to, 'size': offset.size,
                          'is_data': offset.is_data}
    if data is not None:
        item['data'] = {'start': data.start}
    return item


@click.group()
@click.version_option(version=tiffhax.__version__, prog_name='tiffhax')
@click.option('--no-color', is_flag=True, help='Disable colored output.')
def main(no_color):
    """tiffhax -- annotate the byte layout of TIFF files.

    Decodes image file directory entries and tells you whether each value
    is stored inline, points at another array, or points at pixel data.
    """
    if no_color:
        log.set_color_enabled(False)


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
def header(path):
    """Show the byte order and first directory offset."""
    try:
        with open(path, 'rb') as f:
            hdr = read_header(f)
    except TiffHaxError as e:
        _fail(e)

    click.echo(f'File: {Path(path).name}')
    click.echo(f'Byte order: {hdr.order.name} ({hdr.order.marker.decode()})')
    click.echo(f'First directory: {hdr.first_ifd_offset}')


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.option('--offset', type=int, default=None,
              help='Directory offset to decode (default: first directory).')
@click.option('--verbose', '-v', is_flag=True, help='Show raw bytes and ranges.')
@click.option('--json-out', type=click.Path(), help='Write decoded entries as JSON.')
@click.option('--log', 'log_path', type=click.Path(), help='Write log to file.')
@click.option('--no-color', is_flag=True, help='Disable colored output.')
def fields(path, offset, verbose, json_out, log_path, no_color):
    """Decode every entry of one directory table."""
    if no_color:
        log.set_color_enabled(False)

    try:
        log_file = open(log_path, 'w') if log_path else None
    except OSError as e:
        _fail(f'could not open log file {log_path}, {e}')

    def log_msg(msg, line=None):
        click.echo(msg if line is None else line)
        if log_file:
            log_file.write(log.log_info(msg) + '\n')
            log_file.flush()

    try:
        with open(path, 'rb') as f:
            hdr = read_header(f)
            start = hdr.first_ifd_offset if offset is None else offset
            directory = read_directory(f, start, hdr.order)
    except TiffHaxError as e:
        if log_file:
            log_file.write(log.log_error(str(e)) + '\n')
            log_file.close()
        _fail(e)

    banner = (f'Directory at {directory.start} ({hdr.order.name}): '
              f'{len(directory.entries)} field(s)')
    log_msg(banner, log.cli_header(banner))

    region = directory.region()
    for field, follow, data in directory.entries:
        msg = f'  [{field.start}] {describe_field(field)}'
        log_msg(msg, log.cli_field(msg))
        if verbose:
            click.echo(log.cli_dim(f'      bytes {field.start}-{field.end - 1}: '
                                   f'{field.raw.hex(" ")}'))
        if follow is not None:
            msg = f'      -> {describe_offset(follow)}'
            log_msg(msg, log.cli_offset(msg))
            try:
                region.find(follow.to)
            except RegionError:
                pass
            else:
                warn = f'target {follow.to} lies inside this directory'
                click.echo(log.cli_error(f'      !! {warn}'))
                if log_file:
                    log_file.write(log.log_warn(warn) + '\n')
        if data is not None:
            msg = f'      -> {describe_data(data)}'
            log_msg(msg, log.cli_data(msg))

    log_msg(f'Next directory: {directory.next_offset}')

    if json_out:
        payload = {
            'file': str(path),
            'byte_order': hdr.order.name,
            'directory': directory.start,
            'next_directory': directory.next_offset,
            'entries': [_entry_json(*entry) for entry in directory.entries],
        }
        with open(json_out, 'w') as out:
            json.dump(payload, out, indent=2)
        click.echo(f'Results written to {json_out}')

    if log_file:
        log_file.close()


@main.command()
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@click.argument('offset', type=int)
def entry(path, offset):
    """Decode the single 12-byte entry at OFFSET."""
    try:
        with open(path, 'rb') as f:
            hdr = read_header(f)
            field, follow, data = read_field_at(f, offset, hdr.order)
    except TiffHaxError as e:
        _fail(e)

    click.echo(log.cli_field(describe_field(field)))
    click.echo(f'Bytes {field.start}-{field.end - 1}: {field.raw.hex(" ")}')
    click.echo(f'Tag: {field.tag_id} ({field_name(field.tag_id)})')
    click.echo(f'Type: {field.dtype} ({type_name(field.dtype)})')
    click.echo(f'Count: {field.count}')
    click.echo(f'Value: {field.value}')
    if follow is not None:
        click.echo(log.cli_offset(f'Offset: {describe_offset(follow)}'))
    if data is not None:
        click.echo(log.cli_data(f'Data: {describe_data(data)}'))


if __name__ == '__main__':
    main()
