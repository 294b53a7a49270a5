from setuptools import setup, find_packages

setup(
    name="table_grid",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"table_grid": ["renderer/templates/*"]},
    include_package_data=True,
    author="Jonathan Heathcote",
    author_email="mail@jhnet.co.uk",
    description="Lay out tabular data as rendered grid images and HTML tables.",
    install_requires=["Pillow>=10.1", "jinja2", "lxml"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "table-grid=table_grid.scripts.table_grid:main",
        ],
    },
)
