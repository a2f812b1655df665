from setuptools import find_packages, setup

with open("./README.md", encoding='utf-8') as in_:
    setup(
        name='xlsxwriter-cellutils',
        version='0.1.0',
        packages=find_packages(where='src'),
        package_dir={
            "": "src"
        },
        license='MIT',
        description='Helpers to read and write cells, ranges and merge regions of an in-memory worksheet '
                    'addressed by A1 labels, and to flush it into a workbook using XlsxWriter.',
        long_description=in_.read(),
        long_description_content_type="text/markdown",
        python_requires='>=3.8',
        install_requires=[
            "attrs",
            "xlsxwriter",
        ],
        extras_require={
            'testing': ['pytest', 'pytest-mock']
        },
    )
