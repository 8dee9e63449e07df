"""Path search over directed address graphs with DFS and Dijkstra routers."""

__version__ = "0.1.0"
__all__ = ["common", "route", "dfs", "dijkstra"]