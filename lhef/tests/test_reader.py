import io
import os.path
import unittest

from numpy.testing import assert_array_almost_equal, assert_array_equal

from lhef import blocks, errors, reader

data_file_dir = os.path.dirname(__file__)
DATA_FILE = os.path.join(data_file_dir, 'test_data/events.lhe')
DATA_FILE_GZ = DATA_FILE + '.gz'

HEADER = ('<!--\n'
          'File generated for testing the LHEF reader\n'
          '-->\n'
          '<header>\n'
          '<MGVersion>\n'
          '2.6.0\n'
          '</MGVersion>\n'
          '</header>\n'
          '<!--\n'
          'see the note --> above -->\n'
          '-->\n')

MINIMAL = """\
<LesHouchesEvents version="3.0">
<init>
2212 2212 6500 6500 0 0 247000 247000 3 1
1.0 0.1 1.0 1
</init>
<event>
2 1 1.0 91.2 0.0075 0.118
21 -1 0 0 501 502 0 0 45 45 0 0 9
21 -1 0 0 502 501 0 0 -45 45 0 0 9
</event>
<event>
1 1 1.0 91.2 0.0075 0.118
25 1 0 0 0 0 0 0 0 125 125 0 0
</event>
</LesHouchesEvents>
"""


def lhef_from_text(text):
    return reader.LHEFile(io.StringIO(text))


class LHEFileTests(unittest.TestCase):

    def setUp(self):
        self.file = reader.LHEFile.from_path(DATA_FILE)

    def tearDown(self):
        self.file.close()

    def test_version(self):
        """Verify that the version is properly read"""

        self.assertEqual(self.file.version, '3.0')

    def test_header(self):
        """Verify that all header blocks are kept, without the init tag"""

        self.assertEqual(self.file.header, HEADER)

    def test_run_info(self):
        """Verify that the init block is properly read"""

        run_info = self.file.run_info
        self.assertIsInstance(run_info, blocks.RunInfo)
        self.assertEqual(run_info.beam_ids, (2212, 2212))
        self.assertEqual(run_info.beam_energies, (6500., 6500.))
        self.assertEqual(run_info.pdf_groups, (0, 0))
        self.assertEqual(run_info.pdf_sets, (247000, 247000))
        self.assertEqual(run_info.weight_strategy, -4)
        self.assertEqual(run_info.n_processes, 2)
        assert_array_almost_equal(run_info.cross_sections, [506.6, 12.34])
        assert_array_almost_equal(run_info.cross_section_errors, [1.2, 0.03])
        assert_array_almost_equal(run_info.max_weights, [506.6, 12.34])
        assert_array_equal(run_info.process_ids, [1, 2])
        self.assertEqual(run_info.info, "<generator name='TestGen' "
                         "version='1.0'>run annotation</generator>\n")

    def test_events(self):
        """Verify that the events are properly read"""

        event = self.file.next_event()
        self.assertIsInstance(event, blocks.Event)
        self.assertEqual(event.n_particles, 5)
        self.assertEqual(event.process_id, 1)
        self.assertAlmostEqual(event.weight, 506.6)
        self.assertAlmostEqual(event.scale, 91.1876)
        self.assertAlmostEqual(event.alpha_qed, 7.546771e-3)
        self.assertAlmostEqual(event.alpha_qcd, 0.118)
        assert_array_equal(event.particle_ids, [21, 21, 23, 11, -11])
        assert_array_equal(event.statuses, [-1, -1, 2, 1, 1])
        assert_array_equal(event.mothers[3], [3, 3])
        assert_array_equal(event.colors[0], [501, 502])
        assert_array_almost_equal(event.momenta[3], [30., 40., 0., 50., 0.])
        assert_array_almost_equal(event.spins, [9., -9., 9., 1., -1.])
        self.assertEqual(event.info, '<mgrwt>\n<rscale>  0 0.91187600E+02'
                         '</rscale>\n</mgrwt>\n')

        event = self.file.next_event()
        self.assertEqual(event.n_particles, 2)
        self.assertEqual(event.process_id, 2)
        self.assertEqual(event.info, '')

        event = self.file.next_event()
        self.assertEqual(event.n_particles, 3)
        self.assertEqual(event.info, '# weight info 1.0\n')

        self.assertIsNone(self.file.next_event())

    def test_end_of_events_is_repeated(self):
        """Verify that the end of the events is returned again"""

        events = list(self.file.get_events())
        self.assertEqual(len(events), 3)
        self.assertIsNone(self.file.next_event())
        self.assertIsNone(self.file.next_event())
        self.assertEqual(list(self.file), [])

    def test_particles(self):
        """Verify that the particles of an event are properly read"""

        event = next(self.file.get_events())
        particles = list(event.get_particles())
        self.assertEqual(len(particles), 5)
        self.assertEqual(particles[2].name, 'Z_0')
        self.assertTrue(particles[2].is_intermediate)
        self.assertEqual(particles[2].mass, 90.)
        self.assertEqual(particles[4].name, 'positron')
        self.assertEqual(particles[4].p_t, 50.)


class GzipLHEFileTests(LHEFileTests):

    def setUp(self):
        self.file = reader.LHEFile.from_path(DATA_FILE_GZ)


class StreamTests(unittest.TestCase):

    def test_minimal_document(self):
        """Version 3.0, no header, one subprocess and two events"""

        lhef = lhef_from_text(MINIMAL)
        self.assertEqual(lhef.version, '3.0')
        self.assertEqual(lhef.header, '')
        self.assertEqual(lhef.run_info.n_processes, 1)
        self.assertEqual(lhef.run_info.info, '')
        self.assertIsNotNone(lhef.next_event())
        self.assertIsNotNone(lhef.next_event())
        self.assertIsNone(lhef.next_event())
        self.assertIsNone(lhef.next_event())

    def test_binary_stream(self):
        """Lines can also be read as bytes with Windows line endings"""

        data = MINIMAL.replace('\n', '\r\n').encode('utf-8')
        lhef = reader.LHEFile(io.BytesIO(data))
        self.assertEqual(lhef.version, '3.0')
        events = list(lhef.get_events())
        self.assertEqual([len(event) for event in events], [2, 1])

    def test_all_versions(self):
        for version in ['1.0', '2.0', '3.0']:
            text = MINIMAL.replace('"3.0"', f'"{version}"')
            self.assertEqual(lhef_from_text(text).version, version)

    def test_zero_subprocesses_and_particles(self):
        text = MINIMAL.replace('247000 3 1\n1.0 0.1 1.0 1\n', '247000 3 0\n')
        text = text.replace('1 1 1.0 91.2 0.0075 0.118\n'
                            '25 1 0 0 0 0 0 0 0 125 125 0 0\n',
                            '0 1 1.0 91.2 0.0075 0.118\n')
        lhef = lhef_from_text(text)
        self.assertEqual(lhef.run_info.n_processes, 0)
        self.assertEqual(len(lhef.run_info.cross_sections), 0)
        events = list(lhef)
        self.assertEqual(events[1].n_particles, 0)
        self.assertEqual(events[1].momenta.shape, (0, 5))

    def test_header_blocks_in_any_order(self):
        header = ('<!--\ncomment one\n-->\n'
                  '<header>\n<foo>bar</foo>\n</header>\n'
                  '  <!--\ncomment two\n  -->  \n')
        text = MINIMAL.replace('<init>\n', header + '<init>\n', 1)
        lhef = lhef_from_text(text)
        self.assertEqual(lhef.header, header)
        self.assertEqual(lhef.run_info.n_processes, 1)
        self.assertEqual(len(list(lhef)), 2)

    def test_comment_line_ending_in_comment_end(self):
        """Only a line holding just '-->' closes a comment"""

        header = '<!--\nsee a --> b -->\n-->\n'
        text = MINIMAL.replace('<init>\n', header + '<init>\n', 1)
        lhef = lhef_from_text(text)
        self.assertEqual(lhef.header, header)
        self.assertEqual(lhef.run_info.n_processes, 1)

    def test_info_capture(self):
        text = MINIMAL.replace('1.0 0.1 1.0 1\n', '1.0 0.1 1.0 1\n# a\n# b\n')
        text = text.replace('0 0 9\n</event>', '0 0 9\n  <extra/>\n</event>')
        lhef = lhef_from_text(text)
        self.assertEqual(lhef.run_info.info, '# a\n# b\n')
        self.assertEqual(lhef.next_event().info, '  <extra/>\n')


class VersionErrorTests(unittest.TestCase):

    def test_unsupported_version(self):
        text = MINIMAL.replace('"3.0"', '"9.9"')
        with self.assertRaises(errors.UnsupportedVersion) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.version, '9.9')

    def test_missing_version(self):
        text = MINIMAL.replace('version="3.0">', 'version=')
        self.assertRaises(errors.MissingVersion, lhef_from_text, text)

    def test_bad_first_line(self):
        for first_line in ['<LesHouchesEvents>', '<LesHouches version="3.0">',
                           '<LesHouchesEvents version="3.0"',
                           '<LesHouchesEvents version="3.0" >',
                           '<LesHouchesEvents version=3.0>']:
            text = MINIMAL.replace('<LesHouchesEvents version="3.0">',
                                   first_line)
            with self.assertRaises(errors.BadFirstLine) as cm:
                lhef_from_text(text)
            self.assertEqual(cm.exception.line, first_line + '\n')

    def test_empty_input(self):
        self.assertRaises(errors.BadFirstLine, lhef_from_text, '')


class HeaderErrorTests(unittest.TestCase):

    def test_bad_header_start(self):
        text = MINIMAL.replace('<init>\n', '  <foo>  \n<init>\n')
        with self.assertRaises(errors.BadHeaderStart) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.line, '<foo>')

    def test_single_line_comment(self):
        """A comment must open on a line holding only '<!--'"""

        text = MINIMAL.replace('<init>\n', '<!-- x -->\n<init>\n', 1)
        with self.assertRaises(errors.BadHeaderStart) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.line, '<!-- x -->')

    def test_unterminated_comment(self):
        text = '<LesHouchesEvents version="3.0">\n<!--\nno end\n'
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.block, 'header')

    def test_unterminated_header(self):
        text = '<LesHouchesEvents version="3.0">\n<header>\n<init>\n'
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.block, 'header')

    def test_missing_init(self):
        text = '<LesHouchesEvents version="3.0">\n<!--\nonly a comment\n-->\n'
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.block, 'header')


class InitErrorTests(unittest.TestCase):

    def test_conversion_error(self):
        text = MINIMAL.replace('2212 2212 6500 6500', '2212 2212 6500 abc')
        with self.assertRaises(errors.ConversionError) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.text, 'abc')
        self.assertEqual(cm.exception.field, 'EBMUP(2)')

    def test_missing_subprocess_entry(self):
        text = MINIMAL.replace('1.0 0.1 1.0 1\n', '1.0 0.1 1.0\n')
        with self.assertRaises(errors.MissingEntry) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.field, 'LPRUP(1)')

    def test_unterminated_init(self):
        text = MINIMAL.split('</init>')[0]
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.block, 'init')

    def test_indented_init_end(self):
        """The closing tag of the init block must match exactly"""

        text = MINIMAL.replace('</init>\n', ' </init>\n')
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef_from_text(text)
        self.assertEqual(cm.exception.block, 'init')


class EventErrorTests(unittest.TestCase):

    def test_truncated_event(self):
        text = MINIMAL.split('</event>')[0]
        lhef = lhef_from_text(text)
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef.next_event()
        self.assertEqual(cm.exception.block, 'event')

    def test_bad_event_start(self):
        text = MINIMAL.replace('<event>', '<evnt>', 1)
        lhef = lhef_from_text(text)
        with self.assertRaises(errors.BadEventStart) as cm:
            lhef.next_event()
        self.assertEqual(cm.exception.line, '<evnt>\n')

    def test_missing_last_line(self):
        text = MINIMAL.replace('</LesHouchesEvents>\n', '')
        lhef = lhef_from_text(text)
        lhef.next_event()
        lhef.next_event()
        with self.assertRaises(errors.EndOfFile) as cm:
            lhef.next_event()
        self.assertEqual(cm.exception.block, 'LesHouchesEvents')

    def test_particle_conversion_error(self):
        text = MINIMAL.replace('0 0 -45 45 0 0 9', '0 0 -45 4x5 0 0 9')
        lhef = lhef_from_text(text)
        with self.assertRaises(errors.ConversionError) as cm:
            lhef.next_event()
        self.assertEqual(cm.exception.text, '4x5')
        self.assertEqual(cm.exception.field, 'PUP(2, 4)')

    def test_too_few_particles(self):
        """A closing tag in place of a particle can not be converted"""

        text = MINIMAL.replace('2 1 1.0 91.2', '3 1 1.0 91.2')
        lhef = lhef_from_text(text)
        self.assertRaises(errors.ConversionError, lhef.next_event)


if __name__ == '__main__':
    unittest.main()
