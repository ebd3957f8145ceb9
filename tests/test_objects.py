import mock

import jenkins_navigator
from jenkins_navigator import deserializers
from jenkins_navigator import IllegalStateException
from jenkins_navigator.endpoints import JenkinsPathProvider
from jenkins_navigator.futures import Deferred
from jenkins_navigator.objects import ArtifactDescription
from jenkins_navigator.objects import BuildDescription
from jenkins_navigator.objects import BuildInfo
from jenkins_navigator.objects import JobDescription
from jenkins_navigator.objects import JobInfo
from jenkins_navigator.objects import MasterNode
from tests.base import JenkinsTestBase


class ObjectsTestBase(JenkinsTestBase):

    def setUp(self):
        super(ObjectsTestBase, self).setUp()
        self.jenkins = mock.Mock(spec=jenkins_navigator.Jenkins)
        self.jenkins.path_provider = JenkinsPathProvider(self.base_url)

    def make_build_info(self, url=None, artifacts=()):
        return BuildInfo(self.jenkins, False, u'SUCCESS', u'#3',
                         u'my_job #3', 3, 100, 1000,
                         url or self.make_url('job/my_job/3/'), artifacts)

    def make_job_info(self, builds=()):
        return JobInfo(self.jenkins, u'my_job', u'my_job', u'my_job',
                       u'my_job', u'', self.make_url('job/my_job/'), builds,
                       next_build_number=4)


class NodeParentTest(ObjectsTestBase):

    def test_parent_is_write_once(self):
        children = [
            (JobDescription(self.jenkins, u'x', u'a', u'u', u'blue'),
             MasterNode(self.jenkins, [])),
            (BuildDescription(self.jenkins, u'x', 1, u'u'),
             self.make_job_info()),
            (self.make_build_info(), self.make_job_info()),
            (ArtifactDescription(u'a', u'a', u'a'), self.make_build_info()),
        ]
        for child, parent in children:
            child.set_parent(parent)
            self.assertIs(child.parent, parent)
            with self.assertRaises(IllegalStateException):
                child.set_parent(parent)
            self.assertIs(child.parent, parent)

    def test_parent_may_not_be_none(self):
        with self.assertRaises(ValueError):
            BuildDescription(self.jenkins, u'x', 1, u'u').set_parent(None)

    def test_get_parent_of_linked_child(self):
        master = MasterNode(self.jenkins, [])
        job = JobDescription(self.jenkins, u'x', u'a', u'u', u'blue')
        job.set_parent(master)
        self.assertIs(job.get_parent().result(0), master)


class MasterNodeTest(ObjectsTestBase):

    def test_url_is_base_path(self):
        master = MasterNode(self.jenkins, [])
        self.assertEqual(master.url, self.make_url(''))

    def test_get_job_info(self):
        master = MasterNode(self.jenkins, [])
        master.get_job_info(u'my_job')
        self.jenkins.get_job_info.assert_called_once_with(u'my_job')


class JobDescriptionTest(ObjectsTestBase):

    def test_get_job_info_links_master(self):
        master = MasterNode(self.jenkins, [])
        description = JobDescription(self.jenkins, u'x', u'my_job',
                                     self.make_url('job/my_job/'), u'blue')
        description.set_parent(master)
        job_info = self.make_job_info()
        self.jenkins.get_job_info.return_value = Deferred.completed(job_info)

        result = description.get_job_info().result(self.wait)

        self.jenkins.get_job_info.assert_called_once_with(u'my_job')
        self.assertIs(result, job_info)
        self.assertIs(result.parent, master)


class JobInfoTest(ObjectsTestBase):

    def test_get_build_info_links_job(self):
        job_info = self.make_job_info()
        build_info = self.make_build_info()
        self.jenkins.get_build_info.return_value = \
            Deferred.completed(build_info)

        result = job_info.get_build_info(3).result(self.wait)

        self.jenkins.get_build_info.assert_called_once_with(u'my_job', 3)
        self.assertIs(result.parent, job_info)

    def test_get_parent_fetches_master(self):
        master = MasterNode(self.jenkins, [])
        self.jenkins.get_master_node.return_value = Deferred.completed(master)
        self.assertIs(self.make_job_info().get_parent().result(self.wait),
                      master)


class BuildDescriptionTest(ObjectsTestBase):

    def test_get_build_info_uses_parent_name(self):
        build = BuildDescription(self.jenkins, u'x', 3,
                                 self.make_url('job/my_job/3/'))
        job_info = self.make_job_info([build])
        build.set_parent(job_info)
        build_info = self.make_build_info()
        self.jenkins.get_build_info.return_value = \
            Deferred.completed(build_info)

        result = build.get_build_info().result(self.wait)

        self.jenkins.get_build_info.assert_called_once_with(u'my_job', 3)
        self.assertIs(result, build_info)
        self.assertIs(result.parent, job_info)

    def test_get_build_info_without_parent(self):
        build = BuildDescription(self.jenkins, u'x', 7,
                                 self.make_url('job/other%20job/7/'))
        build.get_build_info()
        self.jenkins.get_build_info.assert_called_once_with(u'other job', 7)


class BuildInfoTest(ObjectsTestBase):

    def test_get_parent_when_linked(self):
        build_info = self.make_build_info()
        job_info = self.make_job_info()
        build_info.set_parent(job_info)

        self.assertIs(build_info.get_parent().result(0), job_info)
        self.assertFalse(self.jenkins.get_job_info.called)

    def test_get_parent_resolves_job_name(self):
        job_info = self.make_job_info()
        self.jenkins.get_job_info.return_value = Deferred.completed(job_info)
        build_info = self.make_build_info(self.make_url('job/my_job/3/'))

        self.assertIs(build_info.get_parent().result(self.wait), job_info)
        self.jenkins.get_job_info.assert_called_once_with(u'my_job')

    def test_get_parent_without_job_prefix(self):
        build_info = self.make_build_info(self.make_url('my_job/3/'))
        build_info.get_parent()
        self.jenkins.get_job_info.assert_called_once_with(u'my_job')

    def test_get_parent_malformed_url(self):
        build_info = self.make_build_info(
            self.make_url('job/folder/job/my_job/3/'))
        with self.assertRaises(IllegalStateException):
            build_info.get_parent()

    def test_artifacts_url(self):
        tree = {
            u'building': False, u'result': u'SUCCESS',
            u'displayName': u'#1', u'fullDisplayName': u'PlotSquared #1',
            u'id': u'1', u'duration': 1, u'timestamp': 2,
            u'url': u'https://ci.athion.net/job/PlotSquared/1/',
            u'artifacts': [
                {u'relativePath': u'target/foo.jar'},
                {u'relativePath': u'/libs/bar.jar'},
            ],
        }
        build_info = deserializers.deserialize_build_info(tree, self.jenkins)
        self.assertEqual(
            [artifact.url for artifact in build_info.artifacts],
            [u'https://ci.athion.net/job/PlotSquared/1/artifact/target/foo.jar',
             u'https://ci.athion.net/job/PlotSquared/1/artifact/libs/bar.jar'])
