#!/usr/bin/env python3

import aws_cdk as cdk

from s3bucket.s3bucket_app import build_app

app = cdk.App()
build_app(app)
app.synth()
