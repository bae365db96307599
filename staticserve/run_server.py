"""Development runner: restarts the server whenever a package source file changes.

Files under ./public are read on every request, so only code edits need a restart.
"""
import os
import subprocess
import sys
import time

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    PatternMatchingEventHandler,
)
from watchdog.observers import Observer

# --- Configuration ---
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
WATCH_EXTENSIONS = [".py"]
RELOAD_COOLDOWN = 5.0  # seconds
STOP_TIMEOUT = 5  # seconds to wait after SIGTERM before SIGKILL
# -------------------

# "opened" and "closed" events carry no content change
RESTART_EVENTS = (EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED, EVENT_TYPE_MOVED)


def server_command():
    return [sys.executable, "-m", "staticserve"]


class ServerProcess:
    """Owns the child process running the server."""

    def __init__(self, command=None, stop_timeout=STOP_TIMEOUT):
        self.command = command or server_command()
        self.stop_timeout = stop_timeout
        self.process = None
        self.started_at = 0.0

    def start(self):
        self.stop()
        self.process = subprocess.Popen(self.command)
        self.started_at = time.monotonic()
        print(f"Server started (pid {self.process.pid})")

    def stop(self):
        if self.process is None:
            return
        process, self.process = self.process, None
        process.terminate()
        try:
            process.wait(timeout=self.stop_timeout)
        except subprocess.TimeoutExpired:
            print(f"Server pid {process.pid} ignored SIGTERM, killing it")
            process.kill()
            process.wait()


class SourceChangeHandler(PatternMatchingEventHandler):
    def __init__(self, server, cooldown=RELOAD_COOLDOWN):
        super().__init__(
            patterns=["*" + ext for ext in WATCH_EXTENSIONS],
            ignore_directories=True,
        )
        self.server = server
        self.cooldown = cooldown

    def on_any_event(self, event):
        if event.event_type not in RESTART_EVENTS:
            return
        # One save often fires several events
        if time.monotonic() - self.server.started_at < self.cooldown:
            return
        print(f"{os.path.basename(event.src_path)} changed, restarting server")
        self.server.start()


def main():
    server = ServerProcess()
    observer = Observer()
    observer.schedule(SourceChangeHandler(server), PACKAGE_DIR, recursive=True)

    server.start()
    observer.start()
    print(f"Watching {PACKAGE_DIR} for {', '.join(WATCH_EXTENSIONS)} changes, Ctrl+C to quit")
    try:
        while observer.is_alive():
            observer.join(1)
    except KeyboardInterrupt:
        print()
    finally:
        observer.stop()
        observer.join()
        server.stop()


if __name__ == "__main__":
    main()
