#!/usr/bin/env python3
"""
Build, inspect and validate Bloom filter files.

Copyright (c) 2025 John Byrd
https://github.com/johnwbyrd/bloomer

SPDX-License-Identifier: BSD-3-Clause
"""
import random
from pathlib import Path
from typing import List, Optional, Tuple

import click

from bloom_errors import BloomFilterError
from bloom_filter import BloomFilter
from bloom_persistence import read_bloom_file, write_bloom_file
from bloom_statistics import BloomStatistics
from empirical_validator import (ELEMENT_SIZE, EmpiricalValidator,
                                 check_element_size, check_element_space)

DEFAULT_PROBABILITY = 0.01
DEFAULT_CAPACITY = 10000
DEFAULT_SAMPLES = 100000


def load_elements(input_path: Path, encoding: str = 'utf-8') -> List[bytes]:
    """Load one element per line, skipping blank lines."""
    with open(input_path, 'r', encoding=encoding) as f:
        elements = [line.rstrip('\r\n').encode(encoding)
                    for line in f if line.strip()]
    click.echo(f"Loaded {len(elements):,} elements from {input_path}")
    return elements


def build_bloom_filter(elements: List[bytes], probability: float,
                       capacity: Optional[int] = None) -> BloomFilter:
    """Build Bloom filter sized for ``capacity`` (default: element count)."""
    if capacity is None:
        capacity = max(1, len(elements))
    bloom = BloomFilter.from_false_positive_probability(probability, capacity)
    bloom.config.print_summary()

    click.echo(f"Building Bloom filter ({bloom.size():,} bits, "
               f"{bloom.get_k()} hash functions)...")
    bloom.update(elements)
    click.echo("Bloom filter built successfully")
    return bloom


@click.group()
def main():
    """Bloom filter build tool."""


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--probability", "-p", type=float, default=DEFAULT_PROBABILITY,
              show_default=True, help="Target false positive probability.")
@click.option("--capacity", "-n", type=int, default=None,
              help="Expected number of elements (default: number of input lines).")
@click.option("--encoding", default="utf-8", show_default=True,
              help="Text encoding of the input file.")
def build(input_path: Path, output_path: Path, probability: float,
          capacity: Optional[int], encoding: str):
    """Build a filter from INPUT_PATH (one element per line) into OUTPUT_PATH."""
    try:
        elements = load_elements(input_path, encoding)
        bloom = build_bloom_filter(elements, probability, capacity)
        write_bloom_file(bloom, output_path)
    except BloomFilterError as e:
        raise click.ClickException(str(e))
    click.echo(f"Bloom filter written to {output_path}")
    BloomStatistics(bloom).print_statistics()


@main.command()
@click.argument("filter_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("elements", nargs=-1, required=True)
@click.option("--encoding", default="utf-8", show_default=True)
def check(filter_path: Path, elements: Tuple[str, ...], encoding: str):
    """Test ELEMENTS against a persisted filter."""
    try:
        bloom = read_bloom_file(filter_path)
    except BloomFilterError as e:
        raise click.ClickException(str(e))
    for element in elements:
        if bloom.contains(element.encode(encoding)):
            click.echo(f"{element}: possibly present")
        else:
            click.echo(f"{element}: definitely absent")


@main.command()
@click.argument("filter_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--capacity", "-n", type=int, default=None,
              help="Expected number of elements the filter was built for.")
def stats(filter_path: Path, capacity: Optional[int]):
    """Print statistics for a persisted filter."""
    try:
        bloom = read_bloom_file(filter_path, capacity)
    except BloomFilterError as e:
        raise click.ClickException(str(e))
    BloomStatistics(bloom).print_statistics()


@main.command()
@click.option("--probability", "-p", type=float, default=DEFAULT_PROBABILITY,
              show_default=True, help="Target false positive probability.")
@click.option("--capacity", "-n", type=int, default=DEFAULT_CAPACITY,
              show_default=True, help="Number of random elements to insert.")
@click.option("--samples", type=int, default=DEFAULT_SAMPLES,
              show_default=True, help="Number of random non-members to test.")
@click.option("--element-size", type=int, default=ELEMENT_SIZE,
              show_default=True, help="Size of each random element in bytes.")
@click.option("--seed", type=int, default=None, help="Random seed.")
def validate(probability: float, capacity: int, samples: int,
             element_size: int, seed: Optional[int]):
    """Measure the false positive rate with random elements."""
    try:
        bloom = BloomFilter.from_false_positive_probability(probability, capacity)
        check_element_size(element_size)
        check_element_space(element_size, capacity + samples)
    except BloomFilterError as e:
        raise click.ClickException(str(e))
    bloom.config.print_summary()
    validator = EmpiricalValidator.populated(
        bloom, capacity, element_size, random.Random(seed))
    validator.print_validation(bloom.get_false_positive_probability(), samples)


if __name__ == '__main__':
    main()
