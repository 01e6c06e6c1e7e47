from setuptools import setup, find_packages


setup(name='revsurflib',
      version='0.1.0',
      description='Surfaces of revolution with constant Gaussian curvature: '
                  'profile solvers, spline curves and parametric tessellation',
      author='Stefan Endres, Lutz Mädler',
      author_email='s.endres@iwt-uni-bremen.de',
      license='MIT',
      packages=find_packages(include=['revsurflib', 'revsurflib.*']),
      install_requires=[
          'scipy',
          'numpy',
           ],
      extras_require={
          'io': ['meshio'],
          'plot': ['matplotlib', 'polyscope'],
          'test': ['pytest', 'pytest-cov', 'matplotlib', 'meshio'],
      },
      long_description='None',
      long_description_content_type='text/markdown',
      keywords='differential geometry, surfaces of revolution, tessellation',
      classifiers=[
          'Development Status :: 3 - Alpha',

          'Intended Audience :: Science/Research',
          'Intended Audience :: Developers',
          'Topic :: Scientific/Engineering',
          'Topic :: Scientific/Engineering :: Mathematics',

          'License :: OSI Approved :: MIT License',

          'Programming Language :: Python :: 3.9',
      ],
      zip_safe=False)
