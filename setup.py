from setuptools import setup, find_packages

setup(
    name="git-assistant",
    version="0.1.0",
    description="Interactive terminal menu for git status, add, commit and push",
    python_requires=">=3.9",
    packages=find_packages(include=["git_assistant", "git_assistant.*"]),
    install_requires=["prompt_toolkit>=3.0.30"],
    extras_require={
        "dev": ["pytest>=7.4.0"],
    },
    entry_points={"console_scripts": ["git-assistant=git_assistant.cli:main"]},
    keywords=["git", "cli", "terminal", "menu"],
    license="Apache-2.0",
)
