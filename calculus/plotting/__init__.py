from .graph import sample_domain, segments, curve_segments, save_graph

__all__ = ["sample_domain", "segments", "curve_segments", "save_graph"]
