#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2026 Jenkins Navigator Developers
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
#

'''
.. module:: jenkins_navigator
    :platform: Unix, Windows
    :synopsis: Read-only, asynchronous navigation of a Jenkins server

Example::

    >>> import jenkins_navigator
    >>> builder = jenkins_navigator.Jenkins.new_builder()
    >>> builder.with_path('https://ci.example.com')
    >>> builder.with_basic_authentication('user', 'api-token')
    >>> server = builder.build()
    >>> job = server.get_job_info('my_job').result()
    >>> print(job.last_successful_build.number)
'''

from concurrent.futures import ThreadPoolExecutor
import logging

from jenkins_navigator.auth import Authentication  # noqa: F401
from jenkins_navigator.auth import BasicAuthentication
from jenkins_navigator.endpoints import API_TYPE_JSON
from jenkins_navigator.endpoints import JenkinsPathProvider
from jenkins_navigator.endpoints import normalize_api_type
from jenkins_navigator.errors import BadHTTPException  # noqa: F401
from jenkins_navigator.errors import BuildNotFoundException  # noqa: F401
from jenkins_navigator.errors import EmptyResponseException  # noqa: F401
from jenkins_navigator.errors import IllegalStateException
from jenkins_navigator.errors import JenkinsConfigurationException
from jenkins_navigator.errors import JenkinsException  # noqa: F401
from jenkins_navigator.errors import JobNotFoundException  # noqa: F401
from jenkins_navigator.errors import NodeReadException  # noqa: F401
from jenkins_navigator.errors import NotAuthenticatedException  # noqa: F401
from jenkins_navigator.errors import NotFoundException  # noqa: F401
from jenkins_navigator.errors import TimeoutException  # noqa: F401
from jenkins_navigator.errors import TransportException  # noqa: F401
from jenkins_navigator.futures import Deferred
from jenkins_navigator.objects import ArtifactDescription  # noqa: F401
from jenkins_navigator.objects import BuildDescription  # noqa: F401
from jenkins_navigator.objects import BuildInfo  # noqa: F401
from jenkins_navigator.objects import JobDescription  # noqa: F401
from jenkins_navigator.objects import JobInfo  # noqa: F401
from jenkins_navigator.objects import MasterNode  # noqa: F401
from jenkins_navigator.reader import JsonJenkinsReader
from jenkins_navigator.transport import RequestExecutor

logger = logging.getLogger(__name__)

# Set default logging handler to avoid "No handler found" warnings.
logger.addHandler(logging.NullHandler())


class Jenkins(object):
    '''Handle to a Jenkins server.

    Use :meth:`new_builder` to create one. Every fetch runs on a background
    worker and returns a :class:`Deferred`; failures are delivered through
    the handle as :class:`NodeReadException`.
    '''

    def __init__(self, path_provider, authentication=None,
                 api_type=API_TYPE_JSON, timeout=None, executor=None,
                 request_executor=None):
        '''Create handle to Jenkins instance.

        :param path_provider: base URL of the server,
                              :class:`JenkinsPathProvider`
        :param authentication: optional :class:`Authentication`
        :param api_type: API type tag, only ``json`` is supported, ``str``
        :param timeout: Server connection timeout in secs (default: not set),
                        ``float``
        :param executor: ``concurrent.futures.Executor`` running the fetches;
                         a thread pool owned by the client if omitted
        :param request_executor: transport, :class:`RequestExecutor`
        '''
        if path_provider is None:
            raise JenkinsConfigurationException(
                'Path provider may not be None')
        self._path_provider = path_provider
        self._authentication = authentication
        self._api_type = normalize_api_type(api_type)
        self.timeout = timeout

        if request_executor is None:
            request_executor = RequestExecutor(timeout=timeout)
        self._request_executor = request_executor

        self._owns_executor = executor is None
        if executor is None:
            executor = ThreadPoolExecutor(
                thread_name_prefix='jenkins-navigator')
        self._executor = executor

        self._reader = JsonJenkinsReader(self, path_provider,
                                         request_executor,
                                         authentication=authentication,
                                         api_type=self._api_type)

    @staticmethod
    def new_builder():
        '''Return a :class:`JenkinsBuilder` to configure a client with.'''
        return JenkinsBuilder()

    @property
    def path_provider(self):
        return self._path_provider

    @property
    def authentication(self):
        '''The configured :class:`Authentication`, or ``None``.'''
        return self._authentication

    @property
    def api_type(self):
        return self._api_type

    def _submit(self, fn, *args):
        try:
            return Deferred.submit(self._executor, fn, *args)
        except RuntimeError as e:
            # the executor refuses new work once shut down
            return Deferred.failed(IllegalStateException(
                'Cannot fetch from a closed client: %s' % e))

    def get_master_node(self):
        '''Get the master node, which lists the jobs of the server.

        :returns: handle on a :class:`MasterNode`, :class:`Deferred`
        '''
        return self._submit(self._reader.read_master_view)

    def get_job_descriptions(self):
        '''Get the jobs listed by the master node.

        Example::

            >>> for job in server.get_job_descriptions().result():
            ...     print(job.name, job.color)

        :returns: handle on a ``tuple`` of :class:`JobDescription`,
                  :class:`Deferred`
        '''
        return self.get_master_node().map(
            lambda master_node: master_node.job_descriptions)

    def get_job_info(self, name):
        '''Get job information.

        A missing job fails the handle with :class:`NodeReadException`
        caused by :class:`JobNotFoundException`.

        :param name: Job name, ``str``
        :returns: handle on a :class:`JobInfo`, :class:`Deferred`
        '''
        return self._submit(self._reader.read_job_info, name)

    def get_build_info(self, name, number):
        '''Get build information.

        A missing build fails the handle with :class:`NodeReadException`
        caused by :class:`BuildNotFoundException`.

        :param name: Job name, ``str``
        :param number: Build number, ``int``
        :returns: handle on a :class:`BuildInfo`, :class:`Deferred`
        '''
        return self._submit(self._reader.read_build_info, name, number)

    def close(self):
        '''Release the worker pool (if owned) and the HTTP session.

        Fetches already submitted are allowed to finish.
        '''
        if self._owns_executor:
            self._executor.shutdown(wait=False)
        self._request_executor.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return 'Jenkins(%r)' % self._path_provider.base_path


class JenkinsBuilder(object):
    '''Collects the settings of a :class:`Jenkins` client.

    Example::

        >>> builder = Jenkins.new_builder().with_path('http://localhost:8080')
        >>> server = builder.with_timeout(30).build()
    '''

    def __init__(self):
        self._path_provider = None
        self._authentication = None
        self._api_type = API_TYPE_JSON
        self._timeout = None
        self._executor = None

    def with_path(self, path):
        '''Set the base URL of the server; a trailing ``/`` is added.

        :param path: URL of Jenkins server, ``str``
        :raises: :class:`JenkinsConfigurationException` if empty
        '''
        self._path_provider = JenkinsPathProvider(path)
        return self

    def with_authentication(self, authentication):
        self._authentication = authentication
        return self

    def with_basic_authentication(self, username, password):
        '''Authenticate every request with HTTP basic authentication.

        :param username: Server username, ``str``
        :param password: Server password or API token, ``str``
        '''
        if username is None or password is None:
            raise JenkinsConfigurationException(
                'Username and password may not be None')
        return self.with_authentication(
            BasicAuthentication(username, password))

    def with_api_type(self, api_type):
        self._api_type = api_type
        return self

    def with_timeout(self, timeout):
        '''Set the connection timeout, in seconds, of every request.'''
        if timeout is not None and timeout <= 0:
            raise JenkinsConfigurationException(
                'Timeout must be positive, got %r' % timeout)
        self._timeout = timeout
        return self

    def with_executor(self, executor):
        '''Run fetches on ``executor`` instead of a client-owned pool.

        The executor is not shut down by :meth:`Jenkins.close`.
        '''
        self._executor = executor
        return self

    def build(self):
        '''Create the client.

        :returns: :class:`Jenkins`
        :raises: :class:`JenkinsConfigurationException` if no path was set
                 or the API type is not supported
        '''
        if self._path_provider is None:
            raise JenkinsConfigurationException('Path must be specified')
        return Jenkins(self._path_provider,
                       authentication=self._authentication,
                       api_type=normalize_api_type(self._api_type),
                       timeout=self._timeout,
                       executor=self._executor)
