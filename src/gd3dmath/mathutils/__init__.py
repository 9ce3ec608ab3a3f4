"""Value types and math routines: scalars, vectors, colors, rectangles, planes, matrices, viewports."""
