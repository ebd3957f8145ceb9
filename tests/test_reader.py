from mock import patch
import requests

import jenkins_navigator
from tests.base import JenkinsTestBase
from tests.helper import build_response_mock


class JenkinsReaderTestBase(JenkinsTestBase):

    master_data = {
        u'jobs': [
            {u'_class': u'hudson.model.FreeStyleProject',
             u'url': u'http://example.com/job/my_job/',
             u'color': u'blue',
             u'name': u'my_job'},
        ]
    }


class ReadMasterViewTest(JenkinsReaderTestBase):

    @patch('requests.Session.send', autospec=True)
    def test_simple(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, self.master_data)

        master = self.j.get_master_node().result(self.wait)

        self.assertEqual(master.url, self.make_url(''))
        self.assertIs(master.jenkins, self.j)
        self.assertEqual([job.name for job in master.job_descriptions],
                         [u'my_job'])
        self.assertEqual(self.got_request_urls(session_send_mock),
                         [self.make_url('api/json')])
        request = session_send_mock.call_args[0][1]
        self.assertEqual(request.method, 'GET')
        self.assertEqual(request.headers['Accept'], 'application/json')
        self.assertEqual(request.headers['Authorization'],
                         'Basic dGVzdDp0ZXN0')

    @patch('requests.Session.send', autospec=True)
    def test_job_descriptions(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, self.master_data)

        jobs = self.j.get_job_descriptions().result(self.wait)

        self.assertEqual(len(jobs), 1)
        self.assertEqual(jobs[0].url, u'http://example.com/job/my_job/')

    @patch('requests.Session.send', autospec=True)
    def test_not_authenticated(self, session_send_mock):
        for status in (401, 403):
            session_send_mock.return_value = build_response_mock(
                status, reason="Forbidden")

            cause = self.assertNodeReadCause(
                self.j.get_master_node(),
                jenkins_navigator.NotAuthenticatedException)
            self.assertEqual(cause.path, self.make_url('api/json'))

    @patch('requests.Session.send', autospec=True)
    def test_not_found_is_generic(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            404, reason="Not Found")

        cause = self.assertNodeReadCause(self.j.get_master_node(),
                                         jenkins_navigator.BadHTTPException)
        self.assertEqual(cause.status, 404)

    @patch('requests.Session.send', autospec=True)
    def test_server_error(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            500, reason="Internal Server Error")

        with self.assertRaises(jenkins_navigator.NodeReadException) as cm:
            self.j.get_master_node().result(self.wait)
        self.assertEqual(cm.exception.node, 'master node')
        self.assertEqual(
            str(cm.exception),
            'Failed to read master node: Unexpected HTTP status 500 for '
            'http://example.com/api/json')

    @patch('requests.Session.send', autospec=True)
    def test_empty_response(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(200)

        cause = self.assertNodeReadCause(
            self.j.get_master_node(),
            jenkins_navigator.EmptyResponseException)
        self.assertIsInstance(cause, jenkins_navigator.TransportException)
        self.assertEqual(
            str(cause),
            'Error communicating with server[http://example.com/]: '
            'empty response')

    @patch('requests.Session.send', autospec=True)
    def test_return_invalid_json(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, text='not valid JSON')

        cause = self.assertNodeReadCause(
            self.j.get_master_node(), jenkins_navigator.TransportException)
        self.assertIsInstance(cause.cause, ValueError)

    @patch('requests.Session.send', autospec=True)
    def test_return_deeply_nested_json(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, text='[' * 100000)

        cause = self.assertNodeReadCause(
            self.j.get_master_node(), jenkins_navigator.TransportException)
        self.assertIsInstance(cause.cause, RecursionError)

    @patch('requests.Session.send', autospec=True)
    def test_connection_error(self, session_send_mock):
        session_send_mock.side_effect = requests.exceptions.ConnectionError(
            'connection refused')

        cause = self.assertNodeReadCause(
            self.j.get_master_node(), jenkins_navigator.TransportException)
        self.assertIsInstance(cause.cause,
                              requests.exceptions.ConnectionError)

    @patch('requests.Session.send', autospec=True)
    def test_timeout(self, session_send_mock):
        session_send_mock.side_effect = requests.exceptions.ReadTimeout(
            'timed out')

        self.assertNodeReadCause(self.j.get_master_node(),
                                 jenkins_navigator.TimeoutException)

    @patch('requests.Session.send', autospec=True)
    def test_malformed_payload(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, {u'jobs': [{u'name': u'my_job'}]})

        with self.assertRaises(jenkins_navigator.NodeReadException) as cm:
            self.j.get_master_node().result(self.wait)
        self.assertIn("'_class'", str(cm.exception))


class ReadJobInfoTest(JenkinsReaderTestBase):

    job_data = {
        u'name': u'Test Job',
        u'fullName': u'Test Job',
        u'displayName': u'Test Job',
        u'fullDisplayName': u'Test Job',
        u'description': None,
        u'url': u'http://example.com/job/Test%20Job/',
        u'builds': [],
        u'lastBuild': None,
        u'nextBuildNumber': 1,
    }

    @patch('requests.Session.send', autospec=True)
    def test_simple(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, self.job_data)

        job = self.j.get_job_info(u'Test Job').result(self.wait)

        self.assertEqual(job.name, u'Test Job')
        self.assertIsNone(job.last_build)
        self.assertEqual(self.got_request_urls(session_send_mock),
                         [self.make_url('job/Test%20Job/api/json')])

    @patch('requests.Session.send', autospec=True)
    def test_not_found(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            404, reason="Not Found")

        cause = self.assertNodeReadCause(
            self.j.get_job_info(u'FakeJob'),
            jenkins_navigator.JobNotFoundException)
        self.assertEqual(cause.job_name, u'FakeJob')
        self.assertEqual(str(cause), 'job[FakeJob] does not exist')
        self.assertIsInstance(cause, jenkins_navigator.NotFoundException)

    @patch('requests.Session.send', autospec=True)
    def test_forbidden(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            403, reason="Forbidden")

        self.assertNodeReadCause(
            self.j.get_job_info(u'IllegalJob'),
            jenkins_navigator.NotAuthenticatedException)

    @patch('requests.Session.send', autospec=True)
    def test_bad_gateway(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            502, reason="Bad Gateway")

        with self.assertRaises(jenkins_navigator.NodeReadException) as cm:
            self.j.get_job_info(u'TestJob').result(self.wait)
        self.assertEqual(cm.exception.node, 'job node: TestJob')


class ReadBuildInfoTest(JenkinsReaderTestBase):

    build_data = {
        u'building': True,
        u'result': None,
        u'displayName': u'#52',
        u'fullDisplayName': u'TestJob #52',
        u'id': u'52',
        u'duration': 0,
        u'timestamp': 1324317717000,
        u'url': u'http://example.com/job/TestJob/52/',
        u'artifacts': [],
    }

    @patch('requests.Session.send', autospec=True)
    def test_simple(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            200, self.build_data)

        build = self.j.get_build_info(u'TestJob', 52).result(self.wait)

        self.assertTrue(build.building)
        self.assertEqual(build.id, 52)
        self.assertIsNone(build.parent)
        self.assertEqual(self.got_request_urls(session_send_mock),
                         [self.make_url('job/TestJob/52/api/json')])

    @patch('requests.Session.send', autospec=True)
    def test_not_found(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            404, reason="Not Found")

        cause = self.assertNodeReadCause(
            self.j.get_build_info(u'TestJob', 52),
            jenkins_navigator.BuildNotFoundException)
        self.assertEqual((cause.job_name, cause.number), (u'TestJob', 52))
        self.assertEqual(str(cause), 'job[TestJob] number[52] does not exist')

    @patch('requests.Session.send', autospec=True)
    def test_not_authenticated(self, session_send_mock):
        session_send_mock.return_value = build_response_mock(
            401, reason="Unauthorized")

        cause = self.assertNodeReadCause(
            self.j.get_build_info(u'TestJob', 52),
            jenkins_navigator.NotAuthenticatedException)
        self.assertEqual(cause.path,
                         self.make_url('job/TestJob/52/api/json'))
