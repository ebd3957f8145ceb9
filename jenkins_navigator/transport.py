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
.. module:: jenkins_navigator.transport
    :platform: Unix, Windows
    :synopsis: HTTP transport used to talk to a Jenkins server
'''

import logging
import os

import requests
import requests.exceptions as req_exc
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from jenkins_navigator.endpoints import ACCEPT_TYPES
from jenkins_navigator.errors import TimeoutException
from jenkins_navigator.errors import TransportException

logger = logging.getLogger(__name__)


class WrappedSession(requests.Session):
    """A wrapper for requests.Session to override 'verify' property, ignoring REQUESTS_CA_BUNDLE environment variable.

    This is a workaround for https://github.com/kennethreitz/requests/issues/3829 (will be fixed in requests 3.0.0)
    """

    def merge_environment_settings(self, url, proxies, stream, verify, *args,
                                   **kwargs):
        if self.verify is False:
            verify = False

        return super(WrappedSession, self).merge_environment_settings(url,
                                                                      proxies,
                                                                      stream,
                                                                      verify,
                                                                      *args,
                                                                      **kwargs)


class RequestExecutor(object):
    '''Performs the GET requests of a Jenkins client.

    The executor reports every HTTP status back to its caller; only failures
    to complete the exchange raise.

    :param timeout: Server connection timeout in secs (default: not set),
                    ``float``
    '''

    def __init__(self, timeout=None):
        self.timeout = timeout
        self._session = WrappedSession()

        extra_headers = os.environ.get("JENKINS_API_EXTRA_HEADERS", "")
        if extra_headers:
            logger.warning("JENKINS_API_EXTRA_HEADERS adds these HTTP headers: %s", extra_headers.split("\n"))
        for token in extra_headers.split("\n"):
            if ":" in token:
                header, value = token.split(":", 1)
                self._session.headers[header] = value.strip()

        if os.getenv('PYTHONHTTPSVERIFY', '1') == '0':
            logger.debug('PYTHONHTTPSVERIFY=0 detected so we will '
                         'disable requests library SSL verification to keep '
                         'compatibility with older versions.')
            urllib3.disable_warnings(InsecureRequestWarning)
            self._session.verify = False

    def _request(self, req):

        r = self._session.prepare_request(req)
        # requests.Session.send() does not honor env settings by design
        # see https://github.com/requests/requests/issues/2807
        _settings = self._session.merge_environment_settings(
            r.url, {}, None, self._session.verify, None)
        _settings['timeout'] = self.timeout
        return self._session.send(r, **_settings)

    def execute(self, url, api_type, authentication=None):
        '''Send a GET request and return the raw outcome.

        :param url: absolute URL to fetch, ``str``
        :param api_type: API type tag selecting the ``Accept`` header, ``str``
        :param authentication: applied to the request when given,
                               :class:`jenkins_navigator.auth.Authentication`
        :returns: ``(status_code, body)`` where body is ``bytes`` or ``None``
                  when the server sent none
        :raises: :class:`TransportException` if no response was received
        '''
        req = requests.Request('GET', url,
                               headers={'Accept': ACCEPT_TYPES[api_type]},
                               auth=authentication)
        logger.debug('GET %s', url)
        try:
            response = self._request(req)
        except req_exc.Timeout as e:
            raise TimeoutException('Error in request: %s' % e, e) from e
        except req_exc.RequestException as e:
            raise TransportException('Error in request: %s' % e, e) from e
        logger.debug('GET %s returned %s', url, response.status_code)

        body = response.content
        if not body:
            body = None
        return response.status_code, body

    def close(self):
        self._session.close()
