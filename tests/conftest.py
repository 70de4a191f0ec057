import matplotlib

# Plots are rendered off-screen during tests
matplotlib.use("Agg")
