"""Tests for raster partitioning."""

import pytest
import numpy as np


class TestPartition:
    """Test the chunk partitioner."""

    @pytest.mark.parametrize(
        "npix_x,npix_y,chunk_w,chunk_h",
        [
            (100, 100, 32, 32),
            (64, 64, 32, 32),
            (1, 1, 32, 32),
            (37, 5, 4, 7),
            (1600, 1000, 32, 32),
            (7, 300, 3, 64),
        ],
    )
    def test_exact_cover(self, npix_x, npix_y, chunk_w, chunk_h):
        from mandel import partition, coverage

        chunks = partition(npix_x, npix_y, chunk_w, chunk_h)
        counts = coverage(chunks, npix_x, npix_y)
        assert np.all(counts == 1)
        assert sum(c.width * c.height for c in chunks) == npix_x * npix_y

    def test_chunks_inside_image(self):
        from mandel import partition

        for c in partition(50, 30, 16, 16):
            assert 0 <= c.x < 50 and 0 <= c.y < 30
            assert c.x_end <= 50 and c.y_end <= 30
            assert 0 < c.width <= 16 and 0 < c.height <= 16

    def test_column_major_order(self):
        from mandel import partition, Chunk

        chunks = partition(5, 5, 3, 2)
        assert chunks == [
            Chunk(0, 0, 3, 2),
            Chunk(0, 2, 3, 2),
            Chunk(0, 4, 3, 1),
            Chunk(3, 0, 2, 2),
            Chunk(3, 2, 2, 2),
            Chunk(3, 4, 2, 1),
        ]

    def test_edge_chunks_clipped(self):
        from mandel import partition

        chunks = partition(100, 100, 32, 32)
        assert len(chunks) == 16
        assert {c.width for c in chunks if c.x == 96} == {4}
        assert {c.height for c in chunks if c.y == 96} == {4}

    @pytest.mark.parametrize("chunk", [(100, 60), (500, 500), (100, 1000)])
    def test_degenerate_single_chunk(self, chunk):
        from mandel import partition, Chunk

        assert partition(100, 60, *chunk) == [Chunk(0, 0, 100, 60)]

    def test_deterministic(self):
        from mandel import partition

        assert partition(123, 45, 10, 9) == partition(123, 45, 10, 9)

    @pytest.mark.parametrize("args", [(0, 10, 4, 4), (10, 0, 4, 4), (10, 10, 0, 4), (10, 10, 4, -1)])
    def test_rejects_non_positive(self, args):
        from mandel import partition

        with pytest.raises(ValueError):
            partition(*args)


class TestChunkTable:
    """Test the kernel-facing chunk table."""

    def test_chunk_table_layout(self):
        from mandel import partition, chunk_table

        chunks = partition(5, 5, 3, 2)
        table = chunk_table(chunks)
        assert table.shape == (6, 4)
        assert table.dtype == np.int64
        np.testing.assert_array_equal(table[2], [0, 4, 3, 1])
        np.testing.assert_array_equal(table[5], [3, 4, 2, 1])
