import os
from setuptools import setup, find_packages

__package__ = 'repbench'
src_dir = os.path.join(os.path.dirname(__file__))
pkg_init = os.path.join(src_dir, __package__, '__init__.py')
readme_path = os.path.join(src_dir, 'README.md')


with open(pkg_init) as fp:
    for line in fp:
        if line.startswith('__version__'):
            __version__ = eval(line.split('=', 1)[1])
            break


with open(readme_path) as fp:
    __readme__ = fp.read()


setup(
    name=__package__,
    version=__version__,
    description='Run an executable repeatedly and report its mean duration.',
    long_description=__readme__,
    long_description_content_type='text/markdown',
    keywords='benchmark timing subprocess',
    packages=find_packages(exclude=('test',)),
    include_package_data=True,
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Topic :: Utilities',
    ],
    install_requires=[
        'pyyaml',
        'confuse'
    ],
    extras_require={
        'test': ['pytest'],
    },
    package_data={
        'repbench': ['config_default.yaml']
    },
    entry_points={
        'console_scripts': [
            'repbench=repbench.cli:main',
        ],
    }
)
