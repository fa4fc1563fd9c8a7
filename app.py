#!/usr/bin/env python3

import aws_cdk as cdk

from event_hotel_api_stack import EventHotelApiStack

app = cdk.App()
EventHotelApiStack(
    app,
    "EventHotelApiStack",
)

app.synth()
