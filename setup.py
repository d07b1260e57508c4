import os

from setuptools import Extension, find_packages, setup

# Compiling the pure-Python hot paths needs Cython and a C compiler; opt in
# with ETHSIGN_CYTHONIZE=1.
if os.environ.get("ETHSIGN_CYTHONIZE") == "1":
    from Cython.Build import cythonize

    cythonized_extensions = cythonize(
        [
            Extension(
                "ethsign.hashes.keccak",
                ["src/ethsign/hashes/keccak.py"],
                extra_compile_args=["-O3", "-Wno-unused-function"],
                language="c",
            ),
            Extension(
                "ethsign.curves.secp256k1",
                ["src/ethsign/curves/secp256k1.py"],
                extra_compile_args=["-O3", "-Wno-unused-function"],
                language="c",
            ),
        ],
        compiler_directives={
            "language_level": 3,
            "boundscheck": False,
        },
        build_dir=os.path.join("build", "cython"),
    )
else:
    cythonized_extensions = []

if __name__ == "__main__":
    setup(
        name="ethsign",
        version="0.1.0",
        description="Ethereum personal-message signing (keccak256, secp256k1 RFC 6979)",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        extras_require={
            "test": ["pytest", "eth-account", "eth-utils"],
            "cython": ["Cython>=3.0"],
        },
        ext_modules=cythonized_extensions,
    )
