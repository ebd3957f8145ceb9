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
.. module:: jenkins_navigator.errors
    :platform: Unix, Windows
    :synopsis: Exception types raised by the Jenkins navigator
'''


class JenkinsException(Exception):
    '''General exception type for jenkins-API-related failures.'''
    pass


class JenkinsConfigurationException(JenkinsException, ValueError):
    '''Raised when the client is configured with invalid values.'''
    pass


class IllegalStateException(JenkinsException, RuntimeError):
    '''Raised when an entity is used in a way its state does not allow.'''
    pass


class _WrappingException(JenkinsException):

    def __init__(self, message, cause=None):
        super(_WrappingException, self).__init__(message)
        self.cause = cause


class TransportException(_WrappingException):
    '''A special exception to call out a failure talking to the server.

    The underlying error is available as ``cause``.
    '''
    pass


class EmptyResponseException(TransportException):
    '''A special exception to call out the case receiving an empty response.'''
    pass


class TimeoutException(TransportException):
    '''A special exception to call out in the case of a socket timeout.'''


class BadHTTPException(JenkinsException):
    '''A special exception to call out the case of an unexpected HTTP status.'''

    def __init__(self, status, url):
        super(BadHTTPException, self).__init__(
            'Unexpected HTTP status %d for %s' % (status, url))
        self.status = status
        self.url = url


class NodeReadException(_WrappingException):
    '''Raised when a node (master, job or build) could not be read.

    The more specific reason, when one is known, is available as ``cause``
    and as the chained ``__cause__``.
    '''

    def __init__(self, node, cause=None):
        message = 'Failed to read %s' % node
        if cause is not None:
            message = '%s: %s' % (message, cause)
        super(NodeReadException, self).__init__(message, cause)
        self.node = node


class NotFoundException(JenkinsException):
    '''A special exception to call out the case of receiving a 404.'''
    pass


class JobNotFoundException(NotFoundException):

    def __init__(self, job_name):
        super(JobNotFoundException, self).__init__(
            'job[%s] does not exist' % job_name)
        self.job_name = job_name


class BuildNotFoundException(NotFoundException):

    def __init__(self, job_name, number):
        super(BuildNotFoundException, self).__init__(
            'job[%s] number[%d] does not exist' % (job_name, number))
        self.job_name = job_name
        self.number = number


class NotAuthenticatedException(JenkinsException):
    '''Raised on a 401 or 403 response.'''

    def __init__(self, path):
        super(NotAuthenticatedException, self).__init__(
            "The current user is not allowed to read path '%s'" % path)
        self.path = path
