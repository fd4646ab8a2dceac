# type: ignore
from setuptools import find_packages, setup, Command

# Get VERSION constant from lruhashcache.version - we can't simply import that module because
# importing the package would require it to be installed already. Based on
# https://packaging.python.org/guides/single-sourcing-package-version/
version_module_globals = {}
with open('./lruhashcache/version.py') as f:
    exec(f.read(), version_module_globals)
lruhashcache_version = version_module_globals['VERSION']

def parse_requirements(filename):
    """ load requirements from a pip requirements file """
    lineiter = (line.strip() for line in open(filename))
    return [line for line in lineiter if line and not line.startswith("#")]

install_reqs = parse_requirements('requirements.txt')
test_reqs = parse_requirements('test-requirements.txt')


class PyTest(Command):
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import sys
        import subprocess
        errno = subprocess.call([sys.executable, '-m', 'pytest', 'lruhashcache/testing'])
        raise SystemExit(errno)

setup(
    name='lru-hash-cache',
    version=lruhashcache_version,
    packages=find_packages(include=['lruhashcache', 'lruhashcache.*']),
    description='Fixed-capacity hash cache with least-recently-used eviction',
    long_description='Fixed-capacity hash cache with least-recently-used eviction',
    install_requires=install_reqs,
    python_requires='>=3.8',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
    ],
    extras_require={
        "test": test_reqs,
    },
    cmdclass={'test': PyTest},
)
