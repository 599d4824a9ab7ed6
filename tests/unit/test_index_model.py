"""Unit tests for IndexModel sizing."""

import pytest

from index_coverage.components.index_model import IndexModel, ceil_div
from index_coverage.core.errors import ConfigurationError
from index_coverage.core.params import Params
from index_coverage.core.types import IndexKind


@pytest.fixture
def params():
    """1 TB of 16-byte values with 8 kB blocks and a minimum fan-out of 32."""
    return Params(
        total_data_size=1 << 40,
        value_size=16,
        min_data_block=8192,
        min_index_block=8192,
        min_branch=32,
    )


def test_data_index_reference_coverage(params):
    """Test the data index coverage sequence for the 1 TB reference case."""
    index = IndexModel(params, IndexKind.DATA, 32, 512)

    assert params.total_values() == 68719476736
    assert index.entries_per_block == 256
    assert index.block_size == 8192
    assert index.coverage == [131072, 33554432, 8589934592, 2199023255552]
    assert index.height == 4


def test_total_size_sums_ceiling_block_counts(params):
    """Test that partially filled blocks count as whole blocks."""
    index = IndexModel(params, IndexKind.DATA, 32, 512)

    assert index.blocks_per_level() == [524288, 2048, 8, 1]
    assert index.total_size() == (524288 + 2048 + 8 + 1) * 8192
    assert index.total_size() == 4311818240


def test_level_sizes_add_up_to_total(params):
    """Test per-level byte counts against the combined total."""
    index = IndexModel(params, IndexKind.ROW, 12, 512)

    assert sum(index.level_sizes()) == index.total_size()
    assert all(size % index.block_size == 0 for size in index.level_sizes())


def test_row_and_filter_reference_coverage(params):
    """Test narrow-entry indexes for the 1 TB reference case."""
    c1row = IndexModel(params, IndexKind.C1ROW, 6, 512)
    row = IndexModel(params, IndexKind.ROW, 12, 512)
    filt = IndexModel(params, IndexKind.FILTER, 5, 65536)

    assert c1row.entries_per_block == 1365
    assert c1row.block_size == 8190
    assert c1row.coverage == [698880, 953971200, 1302170688000]

    assert row.entries_per_block == 682
    assert row.coverage == [349184, 238143488, 162413858816]

    assert filt.entries_per_block == 1638
    assert filt.coverage == [107347968, 175835971584]
    assert filt.height == 2


def test_height_zero_when_base_covers_everything():
    """Test that no index levels are built over a single base unit."""
    params = Params(65536, 16, 8192, 8192, 32)  # 4096 values
    index = IndexModel(params, IndexKind.FILTER, 5, 65536)

    assert index.coverage == []
    assert index.height == 0
    assert index.blocks_per_level() == []
    assert index.total_size() == 0


def test_base_equal_to_total_values_needs_no_index():
    """Test the boundary where base coverage exactly equals the value count."""
    params = Params(512 * 16, 16, 8192, 8192, 32)
    index = IndexModel(params, IndexKind.DATA, 32, 512)

    assert params.total_values() == 512
    assert index.height == 0


@pytest.mark.parametrize("total_log2", [20, 26, 30, 34, 40, 44])
@pytest.mark.parametrize("min_branch", [2, 4, 32, 100])
@pytest.mark.parametrize("entry_size", [5, 6, 12, 32, 1024])
def test_height_zero_iff_base_covers_total(total_log2, min_branch, entry_size):
    """Test that height is zero exactly when the base already covers all values."""
    params = Params(1 << total_log2, 64, 4096, 4096, min_branch)
    for base in (1, 64, 65536, params.total_values(), params.total_values() + 1):
        index = IndexModel(params, IndexKind.ROW, entry_size, base)
        assert (index.height == 0) == (base >= params.total_values())


@pytest.mark.parametrize("total_log2", [16, 25, 33, 40, 47])
@pytest.mark.parametrize("min_branch", [2, 7, 32])
@pytest.mark.parametrize("min_index_block", [4096, 8192, 1 << 20])
def test_coverage_strictly_increasing_and_last_reaches_total(
    total_log2, min_branch, min_index_block
):
    """Test the coverage sequence shape over a grid of parameters."""
    params = Params(1 << total_log2, 16, 8192, min_index_block, min_branch)
    index = IndexModel(params, IndexKind.DATA, 32, 512)
    total = params.total_values()

    assert index.height == len(index.coverage)
    assert all(a < b for a, b in zip(index.coverage, index.coverage[1:]))
    if index.coverage:
        assert index.coverage[-1] >= total
        assert all(c < total for c in index.coverage[:-1])
        assert index.coverage[0] == 512 * index.entries_per_block


@pytest.mark.parametrize(
    "min_index_block,entry_size,min_branch",
    [
        (8192, 32, 32),
        (8192, 6, 32),
        (8192, 131072, 32),
        (4096, 5, 4),
        (4096, 4096, 2),
        (1, 12, 16),
        (1 << 20, 12, 100),
    ],
)
def test_entries_per_block_formula(min_index_block, entry_size, min_branch):
    """Test fan-out is the block capacity floored by the minimum branch."""
    params = Params(1 << 30, 16, 8192, min_index_block, min_branch)
    index = IndexModel(params, IndexKind.ROW, entry_size, 512)

    assert index.entries_per_block == max(min_index_block // entry_size, min_branch)
    assert index.block_size == entry_size * index.entries_per_block


def test_total_size_monotonic_in_total_data_size():
    """Test that more data never shrinks an index."""
    for kind, entry_size, base in [
        (IndexKind.DATA, 32, 512),
        (IndexKind.C1ROW, 6, 512),
        (IndexKind.ROW, 12, 512),
        (IndexKind.FILTER, 5, 65536),
    ]:
        previous = 0
        for total in range(1 << 20, 1 << 34, (1 << 30) // 7):
            params = Params(total, 16, 8192, 8192, 32)
            size = IndexModel(params, kind, entry_size, base).total_size()
            assert size >= previous
            previous = size


def test_unit_fan_out_is_rejected():
    """Test that a fan-out of one raises instead of looping forever."""
    params = Params(1 << 30, 16, 8192, 4096, 1)

    with pytest.raises(ConfigurationError, match="fan-out"):
        IndexModel(params, IndexKind.DATA, 8192, 512)


def test_unit_fan_out_allowed_when_no_levels_needed():
    """Test that fan-out is irrelevant when the base covers everything."""
    params = Params(4096, 16, 8192, 4096, 1)
    index = IndexModel(params, IndexKind.DATA, 8192, 512)

    assert index.entries_per_block == 1
    assert index.height == 0


@pytest.mark.parametrize("entry_size,base_coverage", [(0, 512), (-1, 512), (6, 0), (6, -5)])
def test_invalid_entry_size_or_base(params, entry_size, base_coverage):
    """Test rejection of non-positive seeds."""
    with pytest.raises(ConfigurationError):
        IndexModel(params, IndexKind.C1ROW, entry_size, base_coverage)


def test_ceil_div():
    """Test integer ceiling division."""
    assert ceil_div(10, 5) == 2
    assert ceil_div(11, 5) == 3
    assert ceil_div(1, 1 << 41) == 1
    assert ceil_div(0, 7) == 0
