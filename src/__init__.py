"""Terminal point-cloud rasterizer demo."""
