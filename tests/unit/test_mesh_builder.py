"""Tests for StlMeshBuilder triangle buffers."""

import numpy as np
import pytest
from stl import mesh

from bookshelf.contracts import MeshBuilderProtocol
from bookshelf.infrastructure.mesh_builder import StlMeshBuilder


def _extents(result: mesh.Mesh) -> list[float]:
    points = result.vectors.reshape(-1, 3)
    return (points.max(axis=0) - points.min(axis=0)).tolist()


def _assert_outward(result: mesh.Mesh) -> None:
    centroids = result.vectors.mean(axis=1)
    dots = np.einsum("ij,ij->i", result.normals, centroids)
    assert (dots >= -1e-4).all()


@pytest.fixture
def builder() -> StlMeshBuilder:
    return StlMeshBuilder()


class TestStlMeshBuilder:
    """Tests for the numpy-stl mesh builder."""

    def test_satisfies_protocol(self, builder: StlMeshBuilder) -> None:
        assert isinstance(builder, MeshBuilderProtocol)

    def test_box(self, builder: StlMeshBuilder) -> None:
        result = builder.build_box(150.0, 2.0, 30.0)
        assert isinstance(result, mesh.Mesh)
        assert len(result) == 12
        assert _extents(result) == pytest.approx([150.0, 2.0, 30.0])
        assert result.vectors.reshape(-1, 3).mean(axis=0).tolist() == pytest.approx([0, 0, 0], abs=1e-6)
        _assert_outward(result)

    def test_rounded_box_keeps_outer_extents(self, builder: StlMeshBuilder) -> None:
        result = builder.build_rounded_box(146.0, 2.0, 28.0, 0.4, 4)
        assert len(result) > 12
        assert _extents(result) == pytest.approx([146.0, 2.0, 28.0], rel=1e-5)
        _assert_outward(result)

    def test_rounded_box_corners_are_cut(self, builder: StlMeshBuilder) -> None:
        result = builder.build_rounded_box(10.0, 10.0, 10.0, 1.0, 4)
        points = result.vectors.reshape(-1, 3)
        distance = np.linalg.norm(points, axis=1).max()
        # A sharp corner would sit at sqrt(3) * 5
        assert distance < np.sqrt(3) * 5 - 0.1

    def test_zero_radius_falls_back_to_box(self, builder: StlMeshBuilder) -> None:
        assert len(builder.build_rounded_box(1.0, 1.0, 1.0, 0.0, 4)) == 12

    def test_cylinder(self, builder: StlMeshBuilder) -> None:
        result = builder.build_cylinder(0.5, 10.0, 16)
        assert len(result) == 4 * 16
        extents = _extents(result)
        assert extents[1] == pytest.approx(10.0)
        assert extents[0] == pytest.approx(1.0)
        assert extents[2] == pytest.approx(1.0, rel=0.05)
        _assert_outward(result)
