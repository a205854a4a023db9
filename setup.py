from setuptools import setup, find_packages

setup(
    name="rowreduce",
    version="1.0",
    description="Gaussian elimination, Gauss-Jordan, determinant and inverse with a step-by-step trace",
    long_description=("Row reduction engine for small dense matrices. Computes row echelon form, reduced row echelon "
                      "form, determinants and inverses with partial pivoting and records every elementary row "
                      "operation as a human-readable step."),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.9",
    packages=find_packages(include=["rowreduce", "rowreduce.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest", "pytest-timeout", "scipy", "sympy"]},
    classifiers=[
        "Intended Audience :: Education", "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9", "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12", "Natural Language :: English",
        "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "gaussian elimination", "gauss-jordan", "row echelon form", "determinant", "inverse"],
    zip_safe=False,
)
