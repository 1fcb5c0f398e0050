"""Test package for geocluster.

This package contains:
- Unit tests (test_projection.py, test_index.py, test_clustering.py)
- Tool tests (test_geojson.py, test_config_loader.py)
- Script tests (test_cluster_places.py)
- Test configuration (conftest.py)
"""
