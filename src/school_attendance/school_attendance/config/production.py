import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_DIR = os.getenv("DATA_DIR", "data")

DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "password123")

SIMULATED_LATENCY_SECONDS = float(os.getenv("SIMULATED_LATENCY_SECONDS", "0"))

DEBUG = False
