import os

SECRET_KEY = "test-secret"

DATA_DIR = os.getenv("DATA_DIR", "data/test")

DEMO_PASSWORD = "password123"

SIMULATED_LATENCY_SECONDS = 0.0

DEBUG = False
TESTING = True
