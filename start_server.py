#!/usr/bin/env python3
"""Start script that launches the vehicles API or the pricing service with uvicorn.

Usage: ``python start_server.py [vehicles|pricing]`` (default: vehicles). The port
comes from the PORT environment variable.
"""

import os
import sys
import subprocess

APPS = {
    "vehicles": ("vehicles.main:app", "8080"),
    "pricing": ("pricing.main:app", "8082"),
}

service = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("SERVICE", "vehicles")
if service not in APPS:
    print(f"Unknown service '{service}'. Choose one of: {', '.join(APPS)}", file=sys.stderr)
    sys.exit(2)
app_path, default_port = APPS[service]

port = os.environ.get("PORT", default_port)
try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default {default_port}", file=sys.stderr)
    port_int = int(default_port)

# Make the src layout importable without an editable install
src_path = os.path.abspath("src")
pythonpath = os.environ.get("PYTHONPATH", "")
os.environ["PYTHONPATH"] = f"{src_path}{os.pathsep}{pythonpath}" if pythonpath else src_path

cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    app_path,
    "--host",
    "0.0.0.0",
    "--port",
    str(port_int),
    "--proxy-headers",
    "--forwarded-allow-ips", "*",
]

print(f"Starting {service} on port {port_int}...", file=sys.stderr)
try:
    sys.exit(subprocess.call(cmd))
except KeyboardInterrupt:
    print("Server interrupted by user", file=sys.stderr)
    sys.exit(0)
