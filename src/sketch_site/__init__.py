"""Turn sketched rectangles and annotations into typed UI components."""
