"""Run with: python -m drawingtrees"""
from drawingtrees.main import main

if __name__ == "__main__":
    main()
