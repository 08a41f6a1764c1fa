import subprocess
import sys
import os


def start_server():
    # PYTHONPATH=src so bible_browser imports without installing
    backend_env = os.environ.copy()
    backend_env["PYTHONPATH"] = os.path.join(os.getcwd(), "src")

    port = backend_env.get("PORT", "3000")

    backend_cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        "bible_browser.main:app",
        "--host",
        "0.0.0.0",
        "--port",
        port,
        "--reload",
    ]

    print(f"Starting Bible Browser on port {port}...")

    process = subprocess.Popen(
        backend_cmd, cwd=os.path.join(os.getcwd(), "src"), env=backend_env
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
    finally:
        if process.poll() is None:
            process.terminate()
            try:
                process.wait(timeout=2)
            except subprocess.TimeoutExpired:
                process.kill()


if __name__ == "__main__":
    start_server()
