
# THIS FILE IS GENERATED FROM ORANGE3-TAGPOS SETUP.PY
short_version = '0.1.0'
version = '0.1.0'
full_version = '0.1.0'
git_revision = 'Unknown'
release = True
if not release:
    version = full_version
    short_version += ".dev"
