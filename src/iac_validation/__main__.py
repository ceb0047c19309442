from .cli.app import run

if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
