# -*- coding: utf-8 -*-
"""
SAC/SEIZMO header definitions.

Header field names per type group, in buffer order, the undefined values
and the enumerated values with their descriptions are defined here.  Field
positions are derived from these tuples in :mod:`seizmo.core.layout`.

:copyright:
    The SEIZMO Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
# short documentation of the commonly used fields, reused by
# seizmo.core.layout.HeaderLayout.describe
DOC = {
    'delta': 'Nominal increment between evenly spaced samples.',
    'depmin': 'Minimum value of the dependent variable.',
    'depmax': 'Maximum value of the dependent variable.',
    'depmen': 'Mean value of the dependent variable.',
    'scale': 'Multiplying scale factor for the dependent variable.',
    'odelta': 'Observed increment if different from the nominal value.',
    'b': 'Beginning value of the independent variable.',
    'e': 'Ending value of the independent variable.',
    'o': 'Event origin time, relative to the reference time.',
    'a': 'First arrival time, relative to the reference time.',
    'f': 'End of event time, relative to the reference time.',
    'stla': 'Station latitude (degrees, north positive).',
    'stlo': 'Station longitude (degrees, east positive).',
    'evla': 'Event latitude (degrees, north positive).',
    'evlo': 'Event longitude (degrees, east positive).',
    'evdp': 'Event depth below surface.',
    'dist': 'Station to event distance (km).',
    'az': 'Event to station azimuth (degrees).',
    'baz': 'Station to event azimuth (degrees).',
    'gcarc': 'Station to event great circle arc length (degrees).',
    'cmpaz': 'Component azimuth (degrees, clockwise from north).',
    'cmpinc': 'Component incident angle (degrees, from vertical).',
    'nzyear': 'GMT year of the reference time.',
    'nzjday': 'GMT julian day of the reference time.',
    'nzhour': 'GMT hour of the reference time.',
    'nzmin': 'GMT minute of the reference time.',
    'nzsec': 'GMT second of the reference time.',
    'nzmsec': 'GMT millisecond of the reference time.',
    'nvhdr': 'Header version number.',
    'npts': 'Number of points per data component.',
    'iftype': 'Type of file (itime, irlim, iamph, ixy, ixyz).',
    'idep': 'Type of dependent variable.',
    'iztype': 'Reference time equivalence.',
    'leven': 'TRUE if data is evenly spaced.',
    'lpspol': 'TRUE if station components have a positive polarity.',
    'lovrok': 'TRUE if it is okay to overwrite this file on disk.',
    'lcalda': 'TRUE if distances are calculated from coordinates.',
    'kstnm': 'Station name.',
    'kevnm': 'Event name (16 characters).',
    'khole': 'Hole or location identifier.',
    'kcmpnm': 'Component name.',
    'knetwk': 'Name of the seismic network.',
    'kinst': 'Generic name of the recording instrument.',
}

# ------------ UNDEFINED VALUES -----------------------------------------------
UNDEF_NUMERIC = -12345.0
UNDEF_STRING = b'-12345'
# pads string fields to their full width
PAD_CHAR = 32

# ------------ HEADER NAMES PER TYPE GROUP, IN BUFFER ORDER -------------------
REAL_HDRS = ('delta', 'depmin', 'depmax', 'scale', 'odelta', 'b', 'e', 'o',
             'a', 'internal0', 't0', 't1', 't2', 't3', 't4', 't5', 't6', 't7',
             't8', 't9', 'f', 'resp0', 'resp1', 'resp2', 'resp3', 'resp4',
             'resp5', 'resp6', 'resp7', 'resp8', 'resp9', 'stla', 'stlo',
             'stel', 'stdp', 'evla', 'evlo', 'evel', 'evdp', 'mag', 'user0',
             'user1', 'user2', 'user3', 'user4', 'user5', 'user6', 'user7',
             'user8', 'user9', 'dist', 'az', 'baz', 'gcarc', 'internal1',
             'internal2', 'depmen', 'cmpaz', 'cmpinc', 'xminimum', 'xmaximum',
             'yminimum', 'ymaximum', 'unused6', 'unused7', 'unused8',
             'unused9', 'unused10', 'unused11', 'unused12')

INT_HDRS = ('nzyear', 'nzjday', 'nzhour', 'nzmin', 'nzsec', 'nzmsec', 'nvhdr',
            'norid', 'nevid', 'npts', 'internal3', 'nwfid', 'nxsize',
            'nysize', 'unused13')

ENUM_HDRS = ('iftype', 'idep', 'iztype', 'unused14', 'iinst', 'istreg',
             'ievreg', 'ievtyp', 'iqual', 'isynth', 'imagtyp', 'imagsrc',
             'unused15', 'unused16', 'unused17', 'unused18', 'unused19',
             'unused20', 'unused21', 'unused22')

LGC_HDRS = ('leven', 'lpspol', 'lovrok', 'lcalda', 'unused23')

# (name, number of characters)
CHAR_HDRS = (('kstnm', 8), ('kevnm', 16), ('khole', 8), ('ko', 8), ('ka', 8),
             ('kt0', 8), ('kt1', 8), ('kt2', 8), ('kt3', 8), ('kt4', 8),
             ('kt5', 8), ('kt6', 8), ('kt7', 8), ('kt8', 8), ('kt9', 8),
             ('kf', 8), ('kuser0', 8), ('kuser1', 8), ('kuser2', 8),
             ('kcmpnm', 8), ('knetwk', 8), ('kdatrd', 8), ('kinst', 8))

NUMERIC_GROUPS = (('real', REAL_HDRS), ('int', INT_HDRS),
                  ('enum', ENUM_HDRS), ('lgc', LGC_HDRS))
STRING_GROUPS = (('char', CHAR_HDRS),)

# ------------ FILETYPES AND VERSIONS -----------------------------------------
# filetype -> {version: (on-disk header storage, on-disk data storage)}
VERSIONS = {
    'SAC Binary File': {6: ('single', 'single')},
    'SEIZMO Binary File': {101: ('single', 'double'),
                           200: ('double', 'single'),
                           201: ('double', 'double')},
}

# ------------ ENUMERATED VALUES ----------------------------------------------
# stored in the header as integers
ENUM_VALS = {'itime': 1, 'irlim': 2, 'iamph': 3, 'ixy': 4, 'iunkn': 5,
             'idisp': 6, 'ivel': 7, 'iacc': 8, 'ib': 9, 'iday': 10, 'io': 11,
             'ia': 12, 'it0': 13, 'it1': 14, 'it2': 15, 'it3': 16, 'it4': 17,
             'it5': 18, 'it6': 19, 'it7': 20, 'it8': 21, 'it9': 22,
             'iradnv': 23, 'itannv': 24, 'iradev': 25, 'itanev': 26,
             'inorth': 27, 'ieast': 28, 'ihorza': 29, 'idown': 30, 'iup': 31,
             'illlbb': 32, 'iwwsn1': 33, 'iwwsn2': 34, 'ihglp': 35, 'isro': 36,
             'inucl': 37, 'ipren': 38, 'ipostn': 39, 'iquake': 40, 'ipreq': 41,
             'ipostq': 42, 'ichem': 43, 'iother': 44, 'igood': 45, 'iglch': 46,
             'idrop': 47, 'ilowsn': 48, 'irldta': 49, 'ivolts': 50,
             'ixyz': 51, 'imb': 52, 'ims': 53, 'iml': 54, 'imw': 55,
             'imd': 56, 'imx': 57, 'ineic': 58, 'ipdeq': 59, 'ipdew': 60,
             'ipde': 61, 'iisc': 62, 'ireb': 63, 'iusgs': 64, 'ibrk': 65,
             'icaltech': 66, 'illnl': 67, 'ievloc': 68, 'ijsop': 69,
             'iuser': 70, 'iunknown': 71, 'iqb': 72, 'iqb1': 73, 'iqb2': 74,
             'iqbx': 75, 'iqmt': 76, 'ieq': 77, 'ieq1': 78, 'ieq2': 79,
             'ime': 80, 'iex': 81, 'inu': 82, 'inc': 83, 'io_': 84, 'il': 85,
             'ir': 86, 'it': 87, 'iu': 88, 'ieq3': 89, 'ieq0': 90, 'iex0': 91,
             'iqc': 92, 'iqb0': 93, 'igey': 94, 'ilit': 95, 'imet': 96,
             'iodor': 97, 'ios': 103}

# reverse look-up: you have the number, want the name
ENUM_NAMES = dict((v, k) for k, v in ENUM_VALS.items())

# human readable descriptions, accepted in place of the name when setting
ENUM_DESC = {'itime': 'Time Series File',
             'irlim': 'Spectral File-Real/Imag',
             'iamph': 'Spectral File-Ampl/Phase',
             'ixy': 'General X vs Y file',
             'ixyz': 'General XYZ (3-D) file',
             'iunkn': 'Unknown',
             'idisp': 'Displacement (NM)',
             'ivel': 'Velocity (NM/SEC)',
             'iacc': 'Acceleration (NM/SEC/SEC)',
             'ivolts': 'Velocity (VOLTS)',
             'ib': 'Begin Time',
             'iday': 'GMT Day',
             'io': 'Event Origin Time',
             'ia': 'First Arrival Time',
             'iquake': 'Earthquake',
             'iother': 'Other',
             'igood': 'Good Data',
             'iglch': 'Glitches',
             'idrop': 'Dropouts',
             'ilowsn': 'Low Signal to Noise Ratio',
             'irldta': 'Real Data',
             'imb': 'Bodywave Magnitude',
             'ims': 'Surfacewave Magnitude',
             'iml': 'Local Magnitude',
             'imw': 'Moment Magnitude',
             'imd': 'Duration Magnitude',
             'imx': 'User Defined Magnitude'}

# description (lower case) -> name
ENUM_BY_DESC = dict((v.lower(), k) for k, v in ENUM_DESC.items())

# spectral filetypes store two dependent components
SPECTRAL_IFTYPES = ('irlim', 'iamph')
