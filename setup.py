from setuptools import setup
import os

PROJECT_ROOT, _ = os.path.split(__file__)
PROJECT_AUTHORS = 'Jenkins Navigator Developers'
REVISION = '0.1.0'
PROJECT_NAME = 'jenkins-navigator'
SHORT_DESCRIPTION = (
  'Jenkins Navigator is a read-only, asynchronous python client for the Jenkins JSON API. It exposes the master '
  'node, jobs, builds and artifacts of a server as a navigable object graph.'
)

try:
    DESCRIPTION = open(os.path.join(PROJECT_ROOT, 'README.rst')).read()
except IOError:
    DESCRIPTION = SHORT_DESCRIPTION


def read_requirements(name):
    with open(os.path.join(PROJECT_ROOT, name)) as requirements:
        return [line.strip() for line in requirements
                if line.strip() and not line.startswith('#')]


setup(
    name=PROJECT_NAME.lower(),
    version=REVISION,
    author=PROJECT_AUTHORS,
    packages=[
        'jenkins_navigator'],
    zip_safe=True,
    include_package_data=False,
    python_requires='>=3.8',
    install_requires=read_requirements('requirements.txt'),
    extras_require={
        'test': read_requirements('test-requirements.txt'),
    },
    description=SHORT_DESCRIPTION,
    long_description=DESCRIPTION,
    license='BSD',
    classifiers=[
        'Topic :: Utilities',
        'Intended Audience :: Developers',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'Environment :: Console',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
