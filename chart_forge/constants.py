"""Layout constants shared by line and area charts."""

# Width reserved on the left of the plotting area for the value axis labels.
AXIS_X_LABEL_AREA = 56

# Upper bound for the side spacing between the axis labels and the first category.
CHART_PADDING = 24

DEFAULT_GRID_LINES = 5
