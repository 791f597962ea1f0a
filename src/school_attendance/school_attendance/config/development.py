import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Directory holding storage.json (record collections)
DATA_DIR = os.getenv("DATA_DIR", "data")

# Every demo account signs in with this password
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "password123")

# Artificial delay around sign-in and attendance save
SIMULATED_LATENCY_SECONDS = float(os.getenv("SIMULATED_LATENCY_SECONDS", "1.0"))

DEBUG = True
