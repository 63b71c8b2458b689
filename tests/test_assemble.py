"""Tests for chunk assembly."""

import pytest
import numpy as np


def _chunk_grids(chunks, fill):
    return [np.full((c.height, c.width, 3), fill(c), dtype=np.uint8) for c in chunks]


class TestAssembleChunks:
    """Test merging per-chunk grids into one image."""

    def test_every_pixel_from_its_chunk(self):
        from mandel import partition, assemble_chunks

        chunks = partition(23, 17, 8, 5)
        grids = _chunk_grids(chunks, lambda c: (c.x, c.y, c.width))
        pixels = assemble_chunks(chunks, grids, 23, 17)

        assert pixels.shape == (17, 23, 3)
        assert pixels.dtype == np.uint8
        for c in chunks:
            block = pixels[c.y:c.y_end, c.x:c.x_end]
            assert np.all(block == np.array([c.x, c.y, c.width], dtype=np.uint8))

    def test_two_dimensional_grids(self):
        from mandel import partition, assemble_chunks

        chunks = partition(6, 4, 4, 4)
        grids = [np.full((c.height, c.width), k + 1, dtype=np.uint16) for k, c in enumerate(chunks)]
        pixels = assemble_chunks(chunks, grids, 6, 4)
        np.testing.assert_array_equal(pixels[:, :4], 1)
        np.testing.assert_array_equal(pixels[:, 4:], 2)

    def test_shape_mismatch(self):
        from mandel import partition, assemble_chunks, AssemblyMismatch

        chunks = partition(10, 10, 8, 8)
        grids = [np.zeros((8, 8, 3), dtype=np.uint8) for _ in chunks]  # edge chunks unclipped
        with pytest.raises(AssemblyMismatch):
            assemble_chunks(chunks, grids, 10, 10)

    def test_count_mismatch(self):
        from mandel import partition, assemble_chunks, AssemblyMismatch

        chunks = partition(10, 10, 5, 5)
        grids = _chunk_grids(chunks, lambda c: 0)
        with pytest.raises(AssemblyMismatch):
            assemble_chunks(chunks, grids[:-1], 10, 10)

    def test_chunk_outside_image(self):
        from mandel import Chunk, assemble_chunks, AssemblyMismatch

        chunks = [Chunk(0, 0, 4, 4), Chunk(4, 0, 4, 4)]
        grids = _chunk_grids(chunks, lambda c: 0)
        with pytest.raises(AssemblyMismatch):
            assemble_chunks(chunks, grids, 6, 4)

    def test_mismatch_is_runtime_error(self):
        from mandel import AssemblyMismatch, MandelbrotError

        assert issubclass(AssemblyMismatch, RuntimeError)
        assert issubclass(AssemblyMismatch, MandelbrotError)


class TestAlloc:
    """Test buffer allocation."""

    def test_alloc_zeros(self):
        from mandel import alloc

        buf = alloc((3, 4, 3), np.uint8)
        assert buf.shape == (3, 4, 3)
        assert not buf.any()

    def test_alloc_impossible_size(self):
        from mandel import alloc, AllocationFailure

        with pytest.raises(AllocationFailure):
            alloc((10**12, 10**12, 3), np.uint8)

    def test_allocation_failure_is_memory_error(self):
        from mandel import AllocationFailure

        assert issubclass(AllocationFailure, MemoryError)
