"""Triangle buffer construction using numpy-stl."""

from __future__ import annotations

import numpy as np
from stl import mesh

# Quads of the 8 box corners, indexed as in _box_corners
_BOX_FACES = (
    (0, 1, 3, 2),  # left (x = min)
    (4, 6, 7, 5),  # right (x = max)
    (0, 4, 5, 1),  # bottom (y = min)
    (2, 3, 7, 6),  # top (y = max)
    (0, 2, 6, 4),  # back (z = min)
    (1, 5, 7, 3),  # front (z = max)
)


def _box_corners(hx: float, hy: float, hz: float) -> np.ndarray:
    return np.array(
        [
            (sx * hx, sy * hy, sz * hz)
            for sx in (-1, 1)
            for sy in (-1, 1)
            for sz in (-1, 1)
        ],
        dtype=float,
    )


def _orient_outward(triangles: np.ndarray) -> np.ndarray:
    """Flip triangles whose normal points towards the origin.

    Every shape built here is convex and centered on the origin, so a
    triangle faces outward when its normal agrees with its centroid.
    """
    normals = np.cross(triangles[:, 1] - triangles[:, 0], triangles[:, 2] - triangles[:, 0])
    centroids = triangles.mean(axis=1)
    inward = np.einsum("ij,ij->i", normals, centroids) < 0
    flipped = triangles.copy()
    flipped[inward, 1], flipped[inward, 2] = triangles[inward, 2], triangles[inward, 1]
    return flipped


def _grid_triangles(points: np.ndarray) -> np.ndarray:
    """Split a (rows, cols, 3) grid of points into triangles."""
    v00 = points[:-1, :-1]
    v10 = points[1:, :-1]
    v11 = points[1:, 1:]
    v01 = points[:-1, 1:]
    first = np.stack([v00, v10, v11], axis=-2).reshape(-1, 3, 3)
    second = np.stack([v00, v11, v01], axis=-2).reshape(-1, 3, 3)
    return np.concatenate([first, second])


def _rounded_axis(half: float, radius: float, segments: int) -> np.ndarray:
    """Sample positions along one box axis, dense inside the rounded zones."""
    inner = half - radius
    low = np.linspace(-half, -inner, segments + 1)
    high = np.linspace(inner, half, segments + 1)
    return np.unique(np.concatenate([low, high]))


class StlMeshBuilder:
    """Builds numpy-stl meshes for the primitives of a scene.

    Single Responsibility: Handles low-level mesh creation from geometry
    primitives. All meshes are centered on the local origin in Y-up
    coordinates, so the scene transform can be applied by the renderer.
    """

    def _to_mesh(self, triangles: np.ndarray) -> mesh.Mesh:
        oriented = _orient_outward(triangles)
        result = mesh.Mesh(np.zeros(len(oriented), dtype=mesh.Mesh.dtype))
        result.vectors[:] = oriented
        result.update_normals()
        return result

    def build_box(self, width: float, height: float, depth: float) -> mesh.Mesh:
        """Create a 12-triangle mesh for a sharp-edged box.

        Args:
            width: Extent along X.
            height: Extent along Y.
            depth: Extent along Z.

        Returns:
            A numpy-stl Mesh object representing the box.
        """
        corners = _box_corners(width / 2, height / 2, depth / 2)
        triangles = []
        for a, b, c, d in _BOX_FACES:
            triangles.append(corners[[a, b, c]])
            triangles.append(corners[[a, c, d]])
        return self._to_mesh(np.array(triangles))

    def build_rounded_box(
        self,
        width: float,
        height: float,
        depth: float,
        radius: float,
        segments: int,
    ) -> mesh.Mesh:
        """Create a mesh for a box whose edges and corners are rounded.

        Each face is sampled on a grid that is dense inside the rounded
        zones. Every sample is then pulled onto the surface of the box
        shrunk by ``radius`` and pushed back out along its offset, which
        turns edges into quarter cylinders and corners into sphere octants.

        Args:
            width: Extent along X.
            height: Extent along Y.
            depth: Extent along Z.
            radius: Edge radius, at most half the smallest extent.
            segments: Number of segments across each rounded edge.

        Returns:
            A numpy-stl Mesh object representing the rounded box.
        """
        half = np.array([width / 2, height / 2, depth / 2])
        radius = min(radius, float(half.min()))
        if radius <= 0:
            return self.build_box(width, height, depth)
        inner_half = half - radius
        samples = [_rounded_axis(h, radius, segments) for h in half]

        faces = []
        for axis in range(3):
            u_axis, v_axis = [a for a in range(3) if a != axis]
            u, v = np.meshgrid(samples[u_axis], samples[v_axis], indexing="ij")
            for sign in (-1.0, 1.0):
                points = np.empty(u.shape + (3,))
                points[..., axis] = sign * half[axis]
                points[..., u_axis] = u
                points[..., v_axis] = v
                core = np.clip(points, -inner_half, inner_half)
                offset = points - core
                length = np.linalg.norm(offset, axis=-1, keepdims=True)
                surface = core + offset / length * radius
                faces.append(_grid_triangles(surface))
        return self._to_mesh(np.concatenate(faces))

    def build_cylinder(
        self, radius: float, height: float, radial_segments: int
    ) -> mesh.Mesh:
        """Create a capped cylinder running along the Y axis.

        Args:
            radius: Cylinder radius.
            height: Length along Y.
            radial_segments: Number of facets around the circumference.

        Returns:
            A numpy-stl Mesh object representing the cylinder.
        """
        theta = np.linspace(0.0, 2 * np.pi, radial_segments, endpoint=False)
        ring = np.stack([radius * np.cos(theta), np.zeros_like(theta), radius * np.sin(theta)], axis=-1)
        bottom = ring + np.array([0.0, -height / 2, 0.0])
        top = ring + np.array([0.0, height / 2, 0.0])
        bottom_next = np.roll(bottom, -1, axis=0)
        top_next = np.roll(top, -1, axis=0)

        bottom_center = np.broadcast_to([0.0, -height / 2, 0.0], bottom.shape)
        top_center = np.broadcast_to([0.0, height / 2, 0.0], top.shape)

        triangles = np.concatenate(
            [
                np.stack([bottom, bottom_next, top_next], axis=1),
                np.stack([bottom, top_next, top], axis=1),
                np.stack([bottom_center, bottom_next, bottom], axis=1),
                np.stack([top_center, top, top_next], axis=1),
            ]
        )
        return self._to_mesh(triangles)
