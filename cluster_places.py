"""
Cluster the Point features of a GeoJSON file and print the result.

    python cluster_places.py testdata/places.json [zoom]

The clustering profile comes from GEOCLUSTER_PROFILE (a .env file is read
if present); an explicit zoom on the command line overrides the profile's.
"""

from __future__ import annotations

import json
import logging
import sys

from dotenv import load_dotenv

from geocluster.spatial import Cluster, cluster_summary
from geocluster.tools import clusters_to_geojson, load_cluster_config, load_features

logger = logging.getLogger("cluster_places")


def main(argv=None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    config = load_cluster_config()
    if len(args) > 1:
        config.zoom = int(args[1])

    features = load_features(args[0])
    engine = Cluster.from_config(config)
    clusters = engine.cluster_points(features)

    entries, merged, total = cluster_summary(clusters)
    logger.info(f"zoom {config.zoom}: {total} points -> {entries} entries ({merged} clusters)")

    print(json.dumps(clusters_to_geojson(clusters), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
