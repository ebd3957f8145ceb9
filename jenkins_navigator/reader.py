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
.. module:: jenkins_navigator.reader
    :platform: Unix, Windows
    :synopsis: Read master, job and build nodes from a Jenkins server
'''

import json
import logging

from jenkins_navigator import deserializers
from jenkins_navigator.endpoints import normalize_api_type
from jenkins_navigator.errors import BadHTTPException
from jenkins_navigator.errors import BuildNotFoundException
from jenkins_navigator.errors import EmptyResponseException
from jenkins_navigator.errors import JobNotFoundException
from jenkins_navigator.errors import NodeReadException
from jenkins_navigator.errors import NotAuthenticatedException
from jenkins_navigator.errors import TransportException

logger = logging.getLogger(__name__)


class JsonJenkinsReader(object):
    '''Fetches the JSON API endpoints and turns them into entities.

    All read methods block and raise :class:`NodeReadException` on failure;
    the more specific reason is its ``cause``.

    :param jenkins: client the entities navigate with, :class:`Jenkins`
    :param path_provider: :class:`JenkinsPathProvider`
    :param executor: transport, :class:`RequestExecutor`
    :param authentication: optional :class:`Authentication`
    '''

    def __init__(self, jenkins, path_provider, executor, authentication=None,
                 api_type='json'):
        self.jenkins = jenkins
        self.path_provider = path_provider
        self.executor = executor
        self.authentication = authentication
        self.api_type = normalize_api_type(api_type)

    def _open(self, url, what, not_found=None):
        '''Return the body of a successful GET of ``url``.

        :param not_found: builds the error reported for a 404, or ``None``
                          to treat a 404 like any other bad status
        '''
        try:
            status, body = self.executor.execute(url, self.api_type,
                                                 self.authentication)
        except TransportException as e:
            raise NodeReadException(what, e) from e

        if 200 <= status < 300:
            if body is None:
                cause = EmptyResponseException(
                    'Error communicating with server[%s]: empty response'
                    % self.path_provider.base_path)
            else:
                return body
        elif status in (401, 403):
            # Jenkins answers 403 for anonymous access as well
            cause = NotAuthenticatedException(url)
        elif status == 404 and not_found is not None:
            cause = not_found()
        else:
            cause = BadHTTPException(status, url)
        logger.debug('Reading %s failed: %s', what, cause)
        raise NodeReadException(what, cause) from cause

    def _parse(self, body, what):
        try:
            return json.loads(body)
        except (ValueError, RecursionError) as e:
            # deeply nested payloads exhaust the decoder stack
            cause = TransportException(
                'Could not parse JSON info for %s' % what, e)
            raise NodeReadException(what, cause) from cause

    def _read(self, kind, url, what, not_found=None):
        tree = self._parse(self._open(url, what, not_found), what)
        return deserializers.deserialize(kind, tree, self.jenkins)

    def read_master_view(self):
        '''Read the master node.

        :returns: :class:`MasterNode`
        '''
        return self._read(deserializers.MASTER,
                          self.path_provider.api_path(self.api_type),
                          'master node')

    def read_job_info(self, job_name):
        '''Read the information of a job.

        :param job_name: Job name, ``str``
        :returns: :class:`JobInfo`
        '''
        return self._read(deserializers.JOB,
                          self.path_provider.job_api_path(job_name,
                                                          self.api_type),
                          'job node: %s' % job_name,
                          lambda: JobNotFoundException(job_name))

    def read_build_info(self, job_name, number):
        '''Read the information of a build.

        :param job_name: Job name, ``str``
        :param number: Build number, ``int``
        :returns: :class:`BuildInfo`
        '''
        return self._read(deserializers.BUILD,
                          self.path_provider.build_api_path(job_name, number,
                                                            self.api_type),
                          'build node: job[%s] number[%d]' % (job_name, number),
                          lambda: BuildNotFoundException(job_name, number))
