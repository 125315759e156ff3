''' Flattening of Bezier curves into runs of line segments.

The number of segments comes from the length of the control polygon, about
one segment per canvas pixel and never fewer than four. Sampling includes
both ends of the curve, so the first point repeats the starting position;
the geometry encoder drops it again as a zero-length step.
'''

from math import hypot

MIN_SEGMENTS = 4

def quadratic(p0, p1, p2, t):
    u = 1 - t
    a, b, c = u * u, 2 * u * t, t * t
    
    return (a * p0[0] + b * p1[0] + c * p2[0],
            a * p0[1] + b * p1[1] + c * p2[1])

def cubic(p0, p1, p2, p3, t):
    u = 1 - t
    a, b, c, d = u * u * u, 3 * u * u * t, 3 * u * t * t, t * t * t
    
    return (a * p0[0] + b * p1[0] + c * p2[0] + d * p3[0],
            a * p0[1] + b * p1[1] + c * p2[1] + d * p3[1])

def segment_count(points):
    ''' Approximate curve length by its control polygon, rounded half up.
    '''
    length = sum([hypot(x2 - x1, y2 - y1) for ((x1, y1), (x2, y2)) in zip(points[:-1], points[1:])])
    return max(MIN_SEGMENTS, int(length + 0.5))

def tessellate(points):
    ''' Return a list of (x, y) samples along a quadratic or cubic curve.

        points is the starting position followed by two or three control
        points; the last control point is the end of the curve.
    '''
    blend = {3: quadratic, 4: cubic}[len(points)]
    count = segment_count(points)
    span = float(count - 1)
    
    return [blend(*(tuple(points) + (i / span, ))) for i in range(count)]
