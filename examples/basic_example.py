import numpy as np

import horizon3d as h3d
from horizon3d.utils import logger


def make_tile(ellipsoid, lon_deg, lat_deg, size_deg=2.0, height=2000.0, n=8):
    """Сетка вершин тайла (n×n) на высоте `height` над эллипсоидом."""
    lons = np.radians(np.linspace(lon_deg, lon_deg + size_deg, n))
    lats = np.radians(np.linspace(lat_deg, lat_deg + size_deg, n))
    radii = ellipsoid.radii.as_np()
    vertices = []
    for lat in lats:
        for lon in lons:
            normal = np.array([np.cos(lat) * np.cos(lon),
                               np.cos(lat) * np.sin(lon),
                               np.sin(lat)])
            k = radii ** 2 * normal
            surface = k / np.sqrt(normal @ k)
            vertices.append(surface + normal * height)
    return np.array(vertices)


if __name__ == "__main__":
    ellipsoid = h3d.Ellipsoid.WGS84
    camera = h3d.Vec3(0.0, 0.0, 20_000_000.0)
    occluder = h3d.EllipsoidalOccluder(ellipsoid, camera)

    north = occluder.is_point_visible(h3d.Vec3(0.0, 0.0, 6_400_000.0))
    south = occluder.is_point_visible(h3d.Vec3(0.0, 0.0, -6_400_000.0))
    logger.info(f"[Example] North pole visible: {north}")
    logger.info(f"[Example] South pole visible: {south}")

    for lat in (60.0, 0.0, -60.0):
        tile = make_tile(ellipsoid, 10.0, lat)
        direction = h3d.BoundingSphere.from_points(tile).center
        culling_point = occluder.compute_horizon_culling_point(direction, tile)
        if culling_point is None:
            logger.info(f"[Example] Tile at lat {lat:.0f}: no culling point, drawing")
            continue
        visible = occluder.is_scaled_space_point_visible(culling_point)
        verdict = "draw" if visible else "culled"
        logger.info(f"[Example] Tile at lat {lat:.0f}: {verdict}")
