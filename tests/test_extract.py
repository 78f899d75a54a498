# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Tests for representative color extraction and raster loading."""

import logging

import numpy as np
import pytest

from blockhue.color.extract import (
    ExtractionConfig,
    ExtractionMethod,
    extract_color,
    extract_variants,
)
from blockhue.errors import EmptyInputError
from blockhue.raster import as_pixel_buffer, load_raster


ALL_METHODS = list(ExtractionMethod)


def _solid_image(r, g, b, height=2, width=2, alpha=None):
    """Create a solid-color image, RGBA if alpha is given."""
    if alpha is None:
        return np.full((height, width, 3), [r, g, b], dtype=np.uint8)
    return np.full((height, width, 4), [r, g, b, alpha], dtype=np.uint8)


class TestUniformInput:

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_uniform_red(self, method):
        assert extract_color(_solid_image(255, 0, 0), method).hex == "#FF0000"

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_uniform_red_rgba(self, method):
        pixels = _solid_image(255, 0, 0, alpha=255)
        assert extract_color(pixels, method).hex == "#FF0000"

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_deterministic(self, method):
        pixels = np.random.RandomState(5).randint(0, 256, (16, 16, 3)).astype(np.uint8)
        assert extract_color(pixels, method) == extract_color(pixels, method)


class TestTransparency:

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_transparent_pixels_ignored(self, method):
        pixels = _solid_image(0, 0, 255, alpha=0)
        pixels[0, 0] = [0, 200, 0, 255]
        assert extract_color(pixels, method).hex == "#00C800"

    def test_partial_alpha_counts(self):
        pixels = _solid_image(0, 0, 255, alpha=0)
        pixels[0, 0] = [0, 200, 0, 1]
        assert extract_color(pixels).hex == "#00C800"

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_fully_transparent_raises(self, method):
        with pytest.raises(EmptyInputError):
            extract_color(_solid_image(255, 0, 0, alpha=0), method)

    def test_zero_area_raises(self):
        with pytest.raises(EmptyInputError):
            extract_color(np.zeros((0, 4, 3), dtype=np.uint8))

    def test_empty_input_is_value_error(self):
        with pytest.raises(ValueError):
            extract_color(np.zeros((4, 0, 4), dtype=np.uint8))


class TestValidation:

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            extract_color(np.zeros((4, 4), dtype=np.uint8))

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError):
            extract_color(np.zeros((4, 4, 2), dtype=np.uint8))

    def test_wrong_dtype(self):
        with pytest.raises(ValueError):
            extract_color(np.zeros((4, 4, 3), dtype=np.float32))

    def test_not_an_array(self):
        with pytest.raises(TypeError):
            extract_color([[[255, 0, 0]]])

    def test_config_validation(self):
        with pytest.raises(ValueError):
            ExtractionConfig(bins=0)
        with pytest.raises(ValueError):
            ExtractionConfig(k=0)


class TestAverage:

    def test_rounds_half_values(self):
        pixels = np.array([[[0, 0, 0], [255, 255, 255]]], dtype=np.uint8)
        assert extract_color(pixels, ExtractionMethod.AVERAGE).hex == "#808080"

    def test_mixed(self):
        pixels = np.array([[[255, 0, 0], [0, 0, 255]]], dtype=np.uint8)
        assert extract_color(pixels, ExtractionMethod.AVERAGE).hex == "#800080"


class TestMostFrequent:

    def test_mode_bucket_centroid(self):
        pixels = np.array([[[250, 0, 0], [254, 0, 0]], [[252, 0, 0], [0, 0, 255]]], dtype=np.uint8)
        assert extract_color(pixels, ExtractionMethod.MOST_FREQUENT).hex == "#FC0000"

    def test_tie_goes_to_lowest_bucket(self):
        pixels = np.array([[[255, 255, 255], [0, 0, 0]]], dtype=np.uint8)
        assert extract_color(pixels, ExtractionMethod.MOST_FREQUENT).hex == "#000000"

    def test_bin_count_changes_bucketing(self):
        # With 2 bins both reds share a bucket; with 256 they do not
        pixels = np.array([[[200, 0, 0], [210, 0, 0], [10, 10, 10]]], dtype=np.uint8)
        coarse = extract_color(pixels, ExtractionMethod.MOST_FREQUENT, ExtractionConfig(bins=2))
        fine = extract_color(pixels, ExtractionMethod.MOST_FREQUENT, ExtractionConfig(bins=256))
        assert coarse.hex == "#CD0000"
        assert fine.hex == "#0A0A0A"


class TestClustering:

    def test_largest_cluster_wins(self):
        pixels = _solid_image(255, 0, 0, height=4, width=4)
        pixels[0, :] = [0, 0, 255]
        config = ExtractionConfig(k=2)
        assert extract_color(pixels, ExtractionMethod.CLUSTERING, config).hex == "#FF0000"

    def test_k_capped_at_unique_colors(self):
        pixels = _solid_image(10, 20, 30, height=3, width=3)
        config = ExtractionConfig(k=8)
        assert extract_color(pixels, ExtractionMethod.CLUSTERING, config).hex == "#0A141E"

    def test_same_seed_same_result(self):
        pixels = np.random.RandomState(9).randint(0, 256, (20, 20, 3)).astype(np.uint8)
        config = ExtractionConfig(k=5, seed=123)
        first = extract_color(pixels, ExtractionMethod.CLUSTERING, config)
        second = extract_color(pixels, ExtractionMethod.CLUSTERING, config)
        assert first == second


class TestEdgeWeighted:

    def test_edges_pull_towards_contrast(self):
        pixels = _solid_image(255, 255, 255, height=3, width=3)
        pixels[1, 1] = [0, 0, 0]
        assert extract_color(pixels, ExtractionMethod.AVERAGE).hex == "#E3E3E3"
        assert extract_color(pixels, ExtractionMethod.EDGE_WEIGHTED).hex == "#F5F5F5"

    def test_single_row_image(self):
        pixels = np.array([[[255, 0, 0], [255, 0, 0], [255, 0, 0]]], dtype=np.uint8)
        assert extract_color(pixels, ExtractionMethod.EDGE_WEIGHTED).hex == "#FF0000"


class TestVariants:

    def test_averages_variants(self):
        buffers = [_solid_image(255, 0, 0), _solid_image(0, 0, 255)]
        assert extract_variants(buffers).hex == "#800080"

    def test_skips_empty_variant_with_warning(self, caplog):
        buffers = [
            _solid_image(255, 0, 0),
            _solid_image(0, 255, 0, alpha=0),
            _solid_image(0, 0, 255),
        ]
        with caplog.at_level(logging.WARNING, logger="blockhue.color.extract"):
            color = extract_variants(buffers)
        assert color.hex == "#800080"
        assert "Skipping texture variant 1" in caplog.text

    def test_all_empty_raises(self):
        with pytest.raises(EmptyInputError):
            extract_variants([_solid_image(0, 0, 0, alpha=0)])

    def test_no_buffers_raises(self):
        with pytest.raises(EmptyInputError):
            extract_variants([])


class TestRaster:

    def test_as_pixel_buffer_passthrough(self):
        pixels = _solid_image(1, 2, 3)
        assert as_pixel_buffer(pixels) is pixels

    def test_as_pixel_buffer_rejects_lists(self):
        with pytest.raises(TypeError):
            as_pixel_buffer([[1, 2, 3]])

    def test_as_pixel_buffer_rejects_dtype(self):
        with pytest.raises(ValueError):
            as_pixel_buffer(np.zeros((2, 2, 3), dtype=np.int32))

    def test_load_rgba_png(self, tmp_path):
        Image = pytest.importorskip("PIL.Image")
        pixels = _solid_image(139, 115, 85, height=4, width=4, alpha=255)
        pixels[0, 0, 3] = 0
        path = tmp_path / "oak_log.png"
        Image.fromarray(pixels).save(path)

        loaded = load_raster(path)
        np.testing.assert_array_equal(loaded, pixels)

    def test_load_rgb_png_becomes_opaque(self, tmp_path):
        Image = pytest.importorskip("PIL.Image")
        path = tmp_path / "stone.png"
        Image.fromarray(_solid_image(127, 127, 127, height=2, width=2)).save(path)

        loaded = load_raster(path)
        assert loaded.shape == (2, 2, 4)
        assert np.all(loaded[..., 3] == 255)
        assert extract_color(loaded).hex == "#7F7F7F"
