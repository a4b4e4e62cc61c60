import matplotlib

# Headless rendering for the visualization tests
matplotlib.use("Agg")
