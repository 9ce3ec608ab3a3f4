"""
Unit tests for the view and projection builders.

Each projection is checked by pushing known points (near/far plane, volume
edges) through vec3_transform_coord and comparing against the canonical
Direct3D volume: x, y in [-1, 1] and z in [0, 1].
"""

import math
import unittest

import numpy as np

from gd3dmath.mathutils import matrix4 as M
from gd3dmath.mathutils.vector import vec3_transform_coord
from test_fixtures.assertions import assert_vector_close


class LookAtTests(unittest.TestCase):
    """Tests for look_at_lh_matrix / look_at_rh_matrix"""

    def testLookAtLHForwardDistance(self):
        """The target ends up straight ahead at +z in left-handed eye space"""
        view = M.look_at_lh_matrix((0, 0, -5), (0, 0, 0), (0, 1, 0))
        assert_vector_close(self, vec3_transform_coord((0, 0, 0), view), (0, 0, 5))

    def testLookAtRHForwardDistance(self):
        """Right-handed eye space looks down -z"""
        view = M.look_at_rh_matrix((0, 0, 5), (0, 0, 0), (0, 1, 0))
        assert_vector_close(self, vec3_transform_coord((0, 0, 0), view), (0, 0, -5))

    def testLookAtMovesEyeToOrigin(self):
        """The eye position maps to the eye-space origin and the basis is orthonormal"""
        eye, at, up = (3.0, 4.0, -2.0), (-1.0, 0.5, 6.0), (0.0, 1.0, 0.0)
        for build in (M.look_at_lh_matrix, M.look_at_rh_matrix):
            view = build(eye, at, up)
            assert_vector_close(self, vec3_transform_coord(eye, view), (0, 0, 0))
            rot = np.asarray(view)[:3, :3]
            self.assertTrue(np.allclose(rot @ rot.T, np.eye(3)), f"{build.__name__} basis not orthonormal")

    def testLookAtKeepsUpInUpperHalf(self):
        """A point above the target has positive eye-space y"""
        view = M.look_at_lh_matrix((0, 0, -5), (0, 0, 0), (0, 1, 0))
        self.assertGreater(vec3_transform_coord((0, 1, 0), view)[1], 0.0)
        # Left-handed: +x stays to the right when looking down +z
        self.assertGreater(vec3_transform_coord((1, 0, 0), view)[0], 0.0)


class OrthographicTests(unittest.TestCase):
    """Tests for the orthographic builders"""

    def testOrthographicLH(self):
        """Box edges map to the canonical volume"""
        m = M.orthographic_lh_matrix(8, 6, 1, 11)
        assert_vector_close(self, vec3_transform_coord((4, -3, 1), m), (1, -1, 0))
        assert_vector_close(self, vec3_transform_coord((-4, 3, 11), m), (-1, 1, 1))
        assert_vector_close(self, vec3_transform_coord((0, 0, 6), m), (0, 0, 0.5))

    def testOrthographicRH(self):
        """Right-handed box spans -zn to -zf"""
        m = M.orthographic_rh_matrix(8, 6, 1, 11)
        assert_vector_close(self, vec3_transform_coord((4, 3, -1), m), (1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((-4, -3, -11), m), (-1, -1, 1))

    def testOrthographicOffCenterLH(self):
        """left/top/near and right/bottom/far corners map to opposite volume corners"""
        left, right, top, bottom, zn, zf = -1.0, 3.0, 4.0, 2.0, 1.0, 5.0
        m = M.orthographic_off_center_lh_matrix(left, right, top, bottom, zn, zf)
        assert_vector_close(self, vec3_transform_coord((left, top, zn), m), (-1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((right, bottom, zf), m), (1, -1, 1))

    def testOrthographicOffCenterRH(self):
        left, right, top, bottom, zn, zf = -1.0, 3.0, 4.0, 2.0, 1.0, 5.0
        m = M.orthographic_off_center_rh_matrix(left, right, top, bottom, zn, zf)
        assert_vector_close(self, vec3_transform_coord((left, top, -zn), m), (-1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((right, bottom, -zf), m), (1, -1, 1))

    def testCenteredMatchesOffCenter(self):
        """A symmetric off-center box equals the centered builder"""
        assert_vector_close(self, np.asarray(M.orthographic_off_center_lh_matrix(-4, 4, 3, -3, 1, 11)),
                            np.asarray(M.orthographic_lh_matrix(8, 6, 1, 11)))


class PerspectiveTests(unittest.TestCase):
    """Tests for the perspective builders"""

    def testPerspectiveLH(self):
        """Near-plane corners map to x, y = +-1 at z = 0; far plane maps to z = 1"""
        w, h, zn, zf = 2.0, 1.5, 0.5, 50.0
        m = M.perspective_lh_matrix(w, h, zn, zf)
        assert_vector_close(self, vec3_transform_coord((w / 2, h / 2, zn), m), (1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((-w / 2, -h / 2, zn), m), (-1, -1, 0))
        # Frustum widens with distance
        scale = zf / zn
        assert_vector_close(self, vec3_transform_coord((w / 2 * scale, 0, zf), m), (1, 0, 1))
        self.assertEqual(m[2][3], 1.0)
        self.assertEqual(m[3][3], 0.0)

    def testPerspectiveRH(self):
        """Right-handed frustum opens toward -z"""
        w, h, zn, zf = 2.0, 1.5, 0.5, 50.0
        m = M.perspective_rh_matrix(w, h, zn, zf)
        assert_vector_close(self, vec3_transform_coord((w / 2, h / 2, -zn), m), (1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((0, 0, -zf), m), (0, 0, 1))
        self.assertEqual(m[2][3], -1.0)

    def testPerspectiveFovLH(self):
        """The top of the field of view maps to y = 1"""
        fovy, aspect, zn, zf = math.pi / 4, 800 / 600, 0.1, 100.0
        m = M.perspective_fov_lh_matrix(fovy, aspect, zn, zf)
        half_h = zn * math.tan(fovy / 2)
        assert_vector_close(self, vec3_transform_coord((half_h * aspect, half_h, zn), m), (1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((0, 0, zf), m), (0, 0, 1))
        self.assertTrue(np.isclose(m[1][1], 1.0 / math.tan(fovy / 2)))
        self.assertTrue(np.isclose(m[0][0], m[1][1] / aspect))

    def testPerspectiveFovRH(self):
        fovy, aspect, zn, zf = math.pi / 3, 1.5, 1.0, 20.0
        m = M.perspective_fov_rh_matrix(fovy, aspect, zn, zf)
        half_h = zn * math.tan(fovy / 2)
        assert_vector_close(self, vec3_transform_coord((-half_h * aspect, -half_h, -zn), m), (-1, -1, 0))
        assert_vector_close(self, vec3_transform_coord((0, 0, -zf), m), (0, 0, 1))

    def testFovMatchesExtent(self):
        """A fov projection equals the extent projection with the matching near-plane size"""
        fovy, aspect, zn, zf = 1.0, 2.0, 0.25, 40.0
        h = 2 * zn * math.tan(fovy / 2)
        assert_vector_close(self, np.asarray(M.perspective_fov_lh_matrix(fovy, aspect, zn, zf)),
                            np.asarray(M.perspective_lh_matrix(h * aspect, h, zn, zf)))
        assert_vector_close(self, np.asarray(M.perspective_fov_rh_matrix(fovy, aspect, zn, zf)),
                            np.asarray(M.perspective_rh_matrix(h * aspect, h, zn, zf)))

    def testPerspectiveOffCenterLH(self):
        """Asymmetric near-plane window maps to the canonical square"""
        left, right, top, bottom, zn, zf = -0.2, 0.6, 0.3, -0.1, 0.5, 10.0
        m = M.perspective_off_center_lh_matrix(left, right, top, bottom, zn, zf)
        assert_vector_close(self, vec3_transform_coord((left, top, zn), m), (-1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((right, bottom, zn), m), (1, -1, 0))
        far = zf / zn
        assert_vector_close(self, vec3_transform_coord((right * far, top * far, zf), m), (1, 1, 1))

    def testPerspectiveOffCenterRH(self):
        left, right, top, bottom, zn, zf = -0.2, 0.6, 0.3, -0.1, 0.5, 10.0
        m = M.perspective_off_center_rh_matrix(left, right, top, bottom, zn, zf)
        assert_vector_close(self, vec3_transform_coord((left, top, -zn), m), (-1, 1, 0))
        assert_vector_close(self, vec3_transform_coord((right, bottom, -zn), m), (1, -1, 0))

    def testSymmetricOffCenterMatchesExtent(self):
        """A symmetric window equals the extent builder"""
        assert_vector_close(self, np.asarray(M.perspective_off_center_lh_matrix(-1, 1, 0.75, -0.75, 0.5, 9)),
                            np.asarray(M.perspective_lh_matrix(2, 1.5, 0.5, 9)))

    def testDegenerateDepthRangeDoesNotRaise(self):
        """zn == zf gives non-finite entries instead of an exception"""
        m = M.perspective_lh_matrix(1.0, 1.0, 1.0, 1.0)
        self.assertTrue(math.isinf(m[2][2]))
        self.assertTrue(math.isinf(m[3][2]))
        o = M.orthographic_lh_matrix(0.0, 1.0, 2.0, 2.0)
        self.assertTrue(math.isinf(o[0][0]))
        self.assertTrue(math.isnan(M.perspective_fov_lh_matrix(1.0, 1.0, 0.0, 0.0)[2][2]))

    def testInfiniteFieldOfViewDoesNotRaise(self):
        """An infinite fovy gives nan scale terms and leaves the depth terms intact"""
        inf = float("inf")
        for build in (M.perspective_fov_lh_matrix, M.perspective_fov_rh_matrix):
            m = build(inf, 1.0, 0.1, 100.0)
            self.assertTrue(math.isnan(m[0][0]), build.__name__)
            self.assertTrue(math.isnan(m[1][1]), build.__name__)
            self.assertTrue(math.isfinite(m[2][2]), build.__name__)


if __name__ == '__main__':
    unittest.main()
