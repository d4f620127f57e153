import os
import re
import sys

def read_version(version_file):
    with open(version_file, 'r') as f:
        return f.read().strip()

def update_file(file_path, pattern, replacement, flags=0):
    with open(file_path, 'r') as f:
        content = f.read()

    new_content = re.sub(pattern, replacement, content, flags=flags)

    if content != new_content:
        with open(file_path, 'w') as f:
            f.write(new_content)
        print(f"Updated {file_path}")
    else:
        print(f"No changes needed for {file_path}")

def main():
    root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    version_file = os.path.join(root_dir, 'VERSION')

    if not os.path.exists(version_file):
        print("VERSION file not found")
        sys.exit(1)

    new_version = read_version(version_file)
    print(f"Propagating version: {new_version}")

    # 1. Package metadata (pyproject.toml)
    # version = "0.1.0"
    update_file(
        os.path.join(root_dir, 'pyproject.toml'),
        r'^version = "[0-9]+\.[0-9]+\.[0-9]+"',
        f'version = "{new_version}"',
        flags=re.MULTILINE
    )

    # 2. Runtime version (circleci_client/__init__.py)
    # __version__ = "0.1.0"
    update_file(
        os.path.join(root_dir, 'circleci_client', '__init__.py'),
        r'__version__ = "[0-9]+\.[0-9]+\.[0-9]+"',
        f'__version__ = "{new_version}"'
    )

if __name__ == "__main__":
    main()
